import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

NOME_REGEX = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ\s]+")
TELEFONE_REGEX = re.compile(r"[0-9]*")
SENHA_REGEX = re.compile(r"(?=.*[A-Z])(?=.*[!@#$&*])(?=.*[0-9]).{8,}")

ROTULOS = {
    "nome": "Nome",
    "sobrenome": "Sobrenome",
    "email": "E-mail",
    "telefone": "Telefone",
    "senha": "Senha",
}


def _vazio(campo: str, feminino: bool = False) -> PydanticCustomError:
    sufixo = "vazia" if feminino else "vazio"
    return PydanticCustomError("campo_vazio", f"{ROTULOS[campo]} não pode estar {sufixo}")


class UsuarioCreate(BaseModel):
    # campo desconhecido no formulário é erro
    model_config = ConfigDict(extra="forbid")

    nome: str
    sobrenome: str
    email: str
    telefone: str = ""
    senha: str

    @field_validator("nome", "sobrenome")
    @classmethod
    def validar_nome(cls, v: str, info: ValidationInfo):
        if v == "":
            raise _vazio(info.field_name)
        if not NOME_REGEX.fullmatch(v):
            raise PydanticCustomError(
                "nome_invalido",
                f"{ROTULOS[info.field_name]} deve conter apenas caracteres alfabéticos, acentuados e espaços",
            )
        return v

    @field_validator("email")
    @classmethod
    def validar_email(cls, v: str):
        if v == "":
            raise _vazio("email")
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email_invalido", "E-mail deve ser um email válido")
        # guardado como veio, sem normalização
        return v

    @field_validator("telefone")
    @classmethod
    def validar_telefone(cls, v: str):
        if not TELEFONE_REGEX.fullmatch(v):
            raise PydanticCustomError("telefone_invalido", "Telefone deve conter apenas números")
        return v

    @field_validator("senha")
    @classmethod
    def validar_senha(cls, v: str):
        if v == "":
            raise _vazio("senha", feminino=True)
        if not SENHA_REGEX.fullmatch(v):
            raise PydanticCustomError(
                "senha_fraca",
                "Senha deve ter pelo menos 8 caracteres, incluir uma letra maiúscula, "
                "um número e um caractere especial (!@#$&*)",
            )
        return v


class UsuarioOut(BaseModel):
    id: int
    nome: str
    sobrenome: str
    email: str
    telefone: str = ""


def primeira_mensagem(exc: ValidationError) -> str:
    """
    Traduz o primeiro erro do pydantic (ordem de declaração dos campos)
    para a mensagem devolvida ao cliente.
    """
    erros = exc.errors()
    if not erros:
        return "Dados inválidos"

    erro = erros[0]
    tipo = erro["type"]
    campo = erro["loc"][0] if erro["loc"] else None
    rotulo = ROTULOS.get(campo, campo)

    if tipo in ("campo_vazio", "nome_invalido", "email_invalido", "telefone_invalido", "senha_fraca"):
        return erro["msg"]
    if tipo == "missing":
        return f"O campo {rotulo} é obrigatório"
    if tipo == "string_type":
        return f"{rotulo} deve ser uma string"
    if tipo == "extra_forbidden":
        return f'Campo "{campo}" não é permitido'
    if tipo == "model_type":
        return "Corpo da requisição inválido"
    return erro["msg"]
