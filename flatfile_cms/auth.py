from flatfile_cms import app

from flask import session, flash, redirect, url_for
from passlib.context import CryptContext

from functools import wraps
import logging

logger=logging.getLogger(__name__)

pwd_context=CryptContext(schemes=["argon2","bcrypt"],
                         deprecated="auto",
                         argon2__rounds=app.config["ARGON2_ROUNDS"],
                         argon2__memory_cost=app.config["ARGON2_MEMORY_COST"])

SIGNIN_REQUIRED_MESSAGE="You must be signed in to do that."

def compute_password_hash(password):
    return pwd_context.hash(password)

def validate_password(users, username, password):
    """Check a username/password pair against a loaded users mapping."""
    stored_hash=users.get(username)
    if stored_hash is None:
        # Hash anyway to avoid leaking username existence via timing side channel
        compute_password_hash(password)
        logger.warning("Sign in attempt for unknown user %s", username)
        return False
    try:
        verify_result=pwd_context.verify(password, stored_hash)
    except (TypeError, ValueError):
        logger.error("Stored hash for user %s is malformed", username)
        return False
    if not verify_result:
        logger.warning("Bad password for user %s", username)
    return verify_result

def user_signed_in():
    return "username" in session

def login_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        if not user_signed_in():
            flash(SIGNIN_REQUIRED_MESSAGE)
            return redirect(url_for("index"))
        return f(*args, **kwargs)
    return decorated
