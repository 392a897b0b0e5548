# app/db/arquivo.py
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ErroArmazenamento(Exception):
    """Falha ao gravar o arquivo de usuários."""


class RepositorioUsuarios:
    """
    "Banco de dados" em arquivo JSON: uma lista de usuários lida inteira e
    regravada inteira a cada alteração.

    Não há lock entre leitura e escrita. Dois cadastros simultâneos podem ler
    o mesmo snapshot e o último a gravar sobrescreve o outro.
    """

    def __init__(self, caminho):
        self.caminho = Path(caminho)

    def ler(self) -> List[Dict[str, Any]]:
        if not self.caminho.exists():
            return []
        try:
            with open(self.caminho, "r", encoding="utf-8") as f:
                dados = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Erro ao ler banco de dados %s: %s", self.caminho, e)
            return []

        if not isinstance(dados, list):
            logger.error("Banco de dados %s não contém uma lista de usuários", self.caminho)
            return []

        usuarios = [u for u in dados if isinstance(u, dict)]
        if len(usuarios) != len(dados):
            logger.warning(
                "Banco de dados %s: %d entradas que não são objetos foram ignoradas",
                self.caminho,
                len(dados) - len(usuarios),
            )
        return usuarios

    def salvar(self, usuarios: List[Dict[str, Any]]) -> None:
        """
        Grava em um arquivo temporário ao lado do destino e depois troca,
        para que leitores nunca vejam o arquivo pela metade.
        """
        diretorio = self.caminho.parent
        tmp_path = None
        try:
            diretorio.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=diretorio, prefix=".usuarios-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(usuarios, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.caminho)
        except OSError as e:
            logger.error("Erro ao escrever no banco de dados %s: %s", self.caminho, e)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise ErroArmazenamento(str(e)) from e

    # ========= Consultas =========

    def buscar_por_id(self, usuario_id: int) -> Optional[Dict[str, Any]]:
        return next((u for u in self.ler() if u.get("id") == usuario_id), None)

    def buscar_por_email(self, email: str) -> Optional[Dict[str, Any]]:
        return next((u for u in self.ler() if u.get("email") == email), None)


def proximo_id(usuarios: List[Dict[str, Any]]) -> int:
    ids = [
        u.get("id") for u in usuarios
        if isinstance(u.get("id"), int) and not isinstance(u.get("id"), bool)
    ]
    if not ids:
        return 1
    return max(ids) + 1
