# app/services/usuario_service.py
import logging
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from app.core.security import gerar_hash_senha
from app.db.arquivo import RepositorioUsuarios, proximo_id
from app.schemas.usuario import UsuarioCreate, primeira_mensagem

logger = logging.getLogger(__name__)

ID_REGEX = re.compile(r"-?[0-9]+")


class ErroValidacao(Exception):
    """Campo ausente ou malformado. A mensagem vai direto para o cliente."""


class EmailJaCadastrado(Exception):
    def __init__(self, email: str):
        super().__init__("Este email já está cadastrado.")
        self.email = email


def validar_cadastro(dados: Any) -> UsuarioCreate:
    try:
        return UsuarioCreate.model_validate(dados)
    except ValidationError as e:
        raise ErroValidacao(primeira_mensagem(e)) from e


def cadastrar_usuario(repo: RepositorioUsuarios, dados: Any) -> Dict[str, Any]:
    """
    Valida -> checa email duplicado -> gera hash -> grava.

    Retorna o registro gravado (com o hash da senha). Quem chama decide
    o que expor.
    """
    usuario = validar_cadastro(dados)

    usuarios = repo.ler()
    if any(u.get("email") == usuario.email for u in usuarios):
        logger.info("Cadastro recusado: email já cadastrado (%s)", usuario.email)
        raise EmailJaCadastrado(usuario.email)

    novo_usuario = {
        "id": proximo_id(usuarios),
        "nome": usuario.nome,
        "sobrenome": usuario.sobrenome,
        "email": usuario.email,
        "telefone": usuario.telefone,
        "senha": gerar_hash_senha(usuario.senha),
    }
    usuarios.append(novo_usuario)

    # ErroArmazenamento sobe para a rota
    repo.salvar(usuarios)
    logger.info("Usuário %s cadastrado (id=%s)", novo_usuario["email"], novo_usuario["id"])
    return novo_usuario


def buscar_usuario_por_id(repo: RepositorioUsuarios, usuario_id) -> Optional[Dict[str, Any]]:
    # só dígitos ASCII, com sinal opcional; qualquer outra coisa não casa
    if not isinstance(usuario_id, str) or not ID_REGEX.fullmatch(usuario_id):
        return None
    return repo.buscar_por_id(int(usuario_id))


def buscar_usuario_por_email(repo: RepositorioUsuarios, email: str) -> Optional[Dict[str, Any]]:
    return repo.buscar_por_email(email)
