import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.logging import configurar_logging
from app.api import cadastro, usuarios


def create_application() -> FastAPI:
    configurar_logging()

    app = FastAPI(title="Cadastro de Usuários")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],         # permite todos os métodos (GET, POST, etc)
        allow_headers=["*"],         # permite todos os headers
    )

    # registrado depois do CORS, então fica por fora dele:
    # todo OPTIONS vira 200 sem corpo, mantendo os headers de CORS
    @app.middleware("http")
    async def responder_options(request: Request, call_next):
        resposta = await call_next(request)
        if request.method != "OPTIONS":
            return resposta
        headers = {
            nome: valor
            for nome, valor in resposta.headers.items()
            if nome.startswith("access-control-") or nome == "vary"
        }
        return Response(status_code=200, headers=headers)

    # mesmas rotas na raiz e em /api (deploy serverless)
    for prefixo in ("", "/api"):
        app.include_router(cadastro.router, prefix=prefixo)
        app.include_router(usuarios.router, prefix=prefixo)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            mensagem = f"Método {request.method} não permitido."
        else:
            mensagem = exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": mensagem},
            headers=getattr(exc, "headers", None),
        )

    return app


app = create_application()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
