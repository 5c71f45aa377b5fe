from typing import Any, Dict, List, Optional

from jose import JWTError, jwt

SESSION_COOKIE = "__session"


def verify_session_token(
    token: str,
    public_key: str,
    authorized_parties: Optional[List[str]] = None,
) -> Optional[Dict[str, Any]]:
    """Verificación del token de sesión de Clerk (RS256, clave PEM)"""
    if not token or not public_key:
        return None

    try:
        payload = jwt.decode(
            token,
            public_key,
            algorithms=["RS256"],
            options={"verify_aud": False},
        )
    except JWTError:
        return None

    # azp solo se comprueba si hay orígenes configurados
    if authorized_parties and payload.get("azp") not in authorized_parties:
        return None

    if not payload.get("sub"):
        return None

    return payload


def extract_token_from_header(authorization: str) -> Optional[str]:
    """Extracción del token del encabezado Authorization"""
    if not authorization:
        return None

    parts = authorization.split()

    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]
