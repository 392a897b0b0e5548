import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.deps import get_repositorio
from app.db.arquivo import ErroArmazenamento, RepositorioUsuarios
from app.services.usuario_service import EmailJaCadastrado, ErroValidacao, cadastrar_usuario

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Cadastro"])


async def ler_corpo(request: Request):
    """
    Aceita JSON ou formulário (application/x-www-form-urlencoded).
    Corpo que não dá pra ler volta como None e a validação recusa.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        return dict(form)

    corpo = await request.body()
    if not corpo:
        return None
    try:
        return json.loads(corpo)
    except ValueError:
        return None


@router.post("/cadastro")
async def cadastrar(request: Request, repo: RepositorioUsuarios = Depends(get_repositorio)):
    try:
        dados = await ler_corpo(request)
        # bcrypt e a regravação do arquivo bloqueiam: rodam no threadpool
        await run_in_threadpool(cadastrar_usuario, repo, dados)
    except ErroValidacao as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmailJaCadastrado as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ErroArmazenamento:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erro ao salvar o cadastro.",
        )
    except Exception as e:
        logger.exception("Erro inesperado no cadastro")
        conteudo = {"message": "Erro ao processar cadastro. Tente novamente."}
        if settings.AMBIENTE == "development":
            conteudo["error"] = str(e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=conteudo)

    return {"message": "Cadastro realizado com sucesso!"}
