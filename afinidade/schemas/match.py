"""Modelos de dados do resultado do match"""

from typing import Dict, List, Literal, Tuple
from pydantic import BaseModel, Field

from afinidade.schemas.politico import PoliticoResumo

ForcaMatch = Literal["strong", "moderate", "weak"]


class TagCoincidente(BaseModel):
    '''Tag em que usuário e político convergem'''
    slug: str
    nome: str
    pontuacao: float
    texto_motivo: str


class PontuacaoCategoria(BaseModel):
    '''Eixo do gráfico radar para uma categoria'''
    categoria: str
    usuario: float = 100
    candidato: float = Field(ge=0, le=100)
    maximo: float = 100


class ResultadoCandidato(BaseModel):
    '''Resultado de afinidade com um político'''
    politico: PoliticoResumo
    pontuacao: float = Field(description="Soma assinada dos pesos das tags coincidentes")
    percentual: int = Field(ge=0, le=100)
    tags_coincidentes: List[TagCoincidente]
    pontuacoes_categoria: List[PontuacaoCategoria]


class ResultadoPartido(BaseModel):
    '''Média de afinidade dos políticos de um partido'''
    partido: str
    percentual: int = Field(ge=0, le=100)
    quantidade: int = Field(gt=0)


class ResultadoAfinidade(BaseModel):
    '''Ranking completo de políticos e partidos'''
    ranking: List[ResultadoCandidato]
    partidos: List[ResultadoPartido]


class Arquetipo(BaseModel):
    '''Perfil descritivo atribuído ao usuário'''
    id: str
    nome: str
    emoji: str
    descricao: str
    padroes_tags: List[str] = Field(min_length=1)
    gradiente: Tuple[str, str]
    model_config = {
        "frozen": True
    }


class MetadadosMatch(BaseModel):
    '''Metadados exibidos na página de resultado'''
    arquetipo: Arquetipo
    categorias_dominantes: List[str]
    forca_match: ForcaMatch


class ResultadoMatch(BaseModel):
    '''Resultado final entregue à camada de apresentação'''
    top_politicos: List[ResultadoCandidato]
    top_partidos: List[ResultadoPartido]
    pontuacoes_usuario: Dict[str, float]
    metadados: MetadadosMatch
