"""Fixtures compartilhadas dos testes da API de cadastro."""

import os
import tempfile

# precisa vir antes de importar o app: settings é lido na importação
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DB_FILE", os.path.join(tempfile.gettempdir(), "cadastro-test-users.json"))

import pytest
from fastapi.testclient import TestClient

from app.core.deps import get_repositorio
from app.db.arquivo import RepositorioUsuarios
from app.main import app


@pytest.fixture
def repo(tmp_path):
    return RepositorioUsuarios(tmp_path / "users.json")


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repositorio] = lambda: repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def dados_validos():
    return {
        "nome": "João",
        "sobrenome": "da Silva",
        "email": "joao@example.com",
        "telefone": "11987654321",
        "senha": "Abcdef1!",
    }
