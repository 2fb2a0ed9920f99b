from fastapi import APIRouter, Depends, HTTPException

from recette.api.dependencies import get_auth_session
from recette.infra.Identity_Provider import AuthError, AuthSession
from recette.utilities.validators import CredentialsInput

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup")
def sign_up(payload: CredentialsInput, auth: AuthSession = Depends(get_auth_session)):
    try:
        auth.sign_up_with_email(payload.email, payload.password)
    except AuthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return auth.to_dict()


@router.post("/signin")
def sign_in(payload: CredentialsInput, auth: AuthSession = Depends(get_auth_session)):
    try:
        auth.sign_in_with_email(payload.email, payload.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return auth.to_dict()


@router.post("/signin/{provider}")
def sign_in_with_provider(provider: str, auth: AuthSession = Depends(get_auth_session)):
    if provider not in auth.providers:
        raise HTTPException(status_code=404, detail=f"Unknown identity provider '{provider}'")
    try:
        user = auth.sign_in_with(provider)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return {"cancelled": user is None, **auth.to_dict()}


@router.post("/signout")
def sign_out(auth: AuthSession = Depends(get_auth_session)):
    auth.sign_out()
    return auth.to_dict()


@router.get("/me")
def me(auth: AuthSession = Depends(get_auth_session)):
    return auth.to_dict()
