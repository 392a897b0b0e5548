"""
Validação do formulário de cadastro.

A primeira falha, na ordem de declaração dos campos, é a mensagem devolvida.
"""

import pytest

from app.services.usuario_service import ErroValidacao, validar_cadastro


def _mensagem(dados):
    with pytest.raises(ErroValidacao) as exc:
        validar_cadastro(dados)
    return str(exc.value)


def test_cadastro_valido(dados_validos):
    usuario = validar_cadastro(dados_validos)
    assert usuario.nome == "João"
    assert usuario.telefone == "11987654321"


@pytest.mark.parametrize("nome", ["Conceição", "Ana Maria", "Øyvind"])
def test_nomes_com_acentos_e_espacos(dados_validos, nome):
    dados_validos["nome"] = nome
    assert validar_cadastro(dados_validos).nome == nome


def test_nome_com_numero_recusado(dados_validos):
    dados_validos["nome"] = "Jo3nas"
    assert _mensagem(dados_validos) == (
        "Nome deve conter apenas caracteres alfabéticos, acentuados e espaços"
    )


def test_sobrenome_vazio(dados_validos):
    dados_validos["sobrenome"] = ""
    assert _mensagem(dados_validos) == "Sobrenome não pode estar vazio"


def test_campo_obrigatorio_ausente(dados_validos):
    del dados_validos["senha"]
    assert _mensagem(dados_validos) == "O campo Senha é obrigatório"


def test_campo_que_nao_e_string(dados_validos):
    dados_validos["nome"] = 123
    assert _mensagem(dados_validos) == "Nome deve ser uma string"


@pytest.mark.parametrize("email", ["joao", "joao@", "joao.example.com", "@example.com"])
def test_email_invalido(dados_validos, email):
    dados_validos["email"] = email
    assert _mensagem(dados_validos) == "E-mail deve ser um email válido"


def test_email_guardado_sem_normalizar(dados_validos):
    dados_validos["email"] = "Joao@Example.COM"
    assert validar_cadastro(dados_validos).email == "Joao@Example.COM"


def test_telefone_opcional(dados_validos):
    del dados_validos["telefone"]
    assert validar_cadastro(dados_validos).telefone == ""

    dados_validos["telefone"] = ""
    assert validar_cadastro(dados_validos).telefone == ""


def test_telefone_so_numeros(dados_validos):
    dados_validos["telefone"] = "(11) 98765-4321"
    assert _mensagem(dados_validos) == "Telefone deve conter apenas números"


@pytest.mark.parametrize("senha", ["abcdefgh", "Abcdefgh", "Abcdefg1", "Ab1!", "abcdef1!"])
def test_senha_fraca_recusada(dados_validos, senha):
    dados_validos["senha"] = senha
    assert _mensagem(dados_validos).startswith("Senha deve ter pelo menos 8 caracteres")


@pytest.mark.parametrize("senha", ["Abcdef1!", "SENHA123#", "x*Y9xxxx"])
def test_senha_forte_aceita(dados_validos, senha):
    dados_validos["senha"] = senha
    assert validar_cadastro(dados_validos).senha == senha


def test_primeira_falha_vence(dados_validos):
    dados_validos["nome"] = "Jo3nas"
    dados_validos["email"] = "invalido"
    dados_validos["senha"] = "abc"
    assert _mensagem(dados_validos).startswith("Nome deve conter")


def test_campo_desconhecido(dados_validos):
    dados_validos["idade"] = "30"
    assert _mensagem(dados_validos) == 'Campo "idade" não é permitido'


@pytest.mark.parametrize("corpo", [None, [], "texto"])
def test_corpo_que_nao_e_objeto(corpo):
    assert _mensagem(corpo) == "Corpo da requisição inválido"
