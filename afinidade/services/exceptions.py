"""Exceções do domínio de afinidade."""


class AfinidadeError(Exception):
    """Erro base do motor de afinidade."""


class ProvedorIndisponivelError(AfinidadeError):
    """Falha ao buscar os candidatos no provedor de dados."""


class RespostaInvalidaError(AfinidadeError):
    """Resposta do quiz que não corresponde a nenhuma pergunta ou opção."""
