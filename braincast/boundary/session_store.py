"""
Cookie-backed session store.

Thin accessors over Starlette's signed-cookie session (``request.session``).
The only value the application keeps in the session is the signed-in user id;
expiry is the cookie's max_age.

Dependencies: starlette
System role: Session identity lookup for the route gate and auth dependency
"""

from starlette.requests import HTTPConnection

SESSION_USER_KEY = "user_id"


def get_session_user_id(conn: HTTPConnection) -> str | None:
    """
    Read the signed-in user id from the session.

    Args:
        conn: Incoming request

    Returns:
        str | None: User id, None when nobody is signed in

    Raises:
        AssertionError: If SessionMiddleware is not installed
    """
    user_id = conn.session.get(SESSION_USER_KEY)
    return str(user_id) if user_id else None


def start_session(conn: HTTPConnection, user_id: str) -> None:
    """Bind user_id to the session, replacing anything stored before."""
    conn.session.clear()
    conn.session[SESSION_USER_KEY] = user_id


def end_session(conn: HTTPConnection) -> None:
    """Drop the session contents; the cookie is expired on the response."""
    conn.session.clear()
