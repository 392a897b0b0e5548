from collections.abc import Generator

from app.core.config import settings
from app.db.arquivo import RepositorioUsuarios

def get_repositorio() -> Generator[RepositorioUsuarios, None, None]:
    """
    Dependência do FastAPI com o repositório do arquivo de usuários.

    Nos testes é trocada via app.dependency_overrides.
    """
    yield RepositorioUsuarios(settings.DB_FILE)
