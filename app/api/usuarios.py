from fastapi import APIRouter, Depends, HTTPException

from app.core.deps import get_repositorio
from app.db.arquivo import RepositorioUsuarios
from app.schemas.usuario import UsuarioOut
from app.services.usuario_service import buscar_usuario_por_email, buscar_usuario_por_id

router = APIRouter(prefix="/usuario", tags=["Usuários"])


#obter usuario pelo id
@router.get("/id/{usuario_id}", response_model=UsuarioOut)
def obter_usuario_por_id(usuario_id: str, repo: RepositorioUsuarios = Depends(get_repositorio)):
    usuario = buscar_usuario_por_id(repo, usuario_id)
    if not usuario:
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    # response_model descarta a senha
    return usuario

#obter usuario pelo email
@router.get("/email/{email}", response_model=UsuarioOut)
def obter_usuario_por_email(email: str, repo: RepositorioUsuarios = Depends(get_repositorio)):
    usuario = buscar_usuario_por_email(repo, email)
    if not usuario:
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    return usuario
