"""Modelos Pydantic para o catálogo de tags e o quiz."""

import math
from enum import Enum
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator


class EscolhaGatilho(str, Enum):
    """Voto que fez o parlamentar receber a tag."""
    SIM = "SIM"
    NAO = "NÃO"


class Justificativa(BaseModel):
    """Evidência de uma tag: a votação e como o voto foi registrado."""
    escolha_gatilho: EscolhaGatilho
    titulo_assunto: str = Field(min_length=1)
    texto_motivo: str = Field(min_length=1)
    id_proposicao: Optional[str] = Field(
        default=None,
        description="ID da votação na Câmara, ou 'metrics'/'demographics' para tags virtuais"
    )
    model_config = {
        "frozen": True
    }


class DefinicaoTag(BaseModel):
    """Entrada do catálogo de tags."""
    slug: str = Field(min_length=1)
    nome: str = Field(min_length=1)
    categoria: str = Field(min_length=1)
    justificativa: Justificativa
    model_config = {
        "frozen": True
    }


class EfeitoTag(BaseModel):
    """Peso somado a uma tag quando a opção é escolhida."""
    tag_slug: str = Field(min_length=1)
    peso: float = Field(gt=0)
    model_config = {
        "frozen": True
    }

    @field_validator("peso")
    @classmethod
    def peso_finito(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("peso deve ser um número finito")
        return v


CorOpcao = Literal["green", "red", "blue", "gray"]
IconeOpcao = Literal[
    "check", "x", "thumbs-up", "thumbs-down", "scale", "shield",
    "dollar", "lock", "unlock", "tree", "tractor", "sparkles",
    "award", "heart", "briefcase",
]


class OpcaoQuiz(BaseModel):
    """Uma das respostas possíveis de uma pergunta."""
    rotulo: str = Field(min_length=1)
    valor: str = Field(min_length=1)
    efeitos: List[EfeitoTag] = Field(min_length=1)
    cor: Optional[CorOpcao] = None
    icone: Optional[IconeOpcao] = None
    model_config = {
        "frozen": True
    }


class PerguntaQuiz(BaseModel):
    """Pergunta de escolha forçada do quiz."""
    id: int = Field(gt=0)
    texto: str = Field(min_length=1)
    opcoes: List[OpcaoQuiz] = Field(min_length=2)
    model_config = {
        "frozen": True
    }

    def opcao(self, valor: str) -> Optional[OpcaoQuiz]:
        for op in self.opcoes:
            if op.valor == valor:
                return op
        return None
