from datetime import timedelta

from jose import jwt

from career_ai.core import security
from career_ai.services.identity import BearerTokenIdentityResolver


def test_valid_token_resolves_subject():
    token = security.create_access_token("user_2abc")
    assert BearerTokenIdentityResolver(token).resolve() == "user_2abc"


def test_missing_token_resolves_nothing():
    assert BearerTokenIdentityResolver(None).resolve() is None
    assert BearerTokenIdentityResolver("").resolve() is None


def test_expired_token():
    token = security.create_access_token("user_2abc", expires_delta=timedelta(seconds=-5))
    assert security.decode_access_token(token) == {"error": "TOKEN_EXPIRED"}
    assert BearerTokenIdentityResolver(token).resolve() is None


def test_forged_token():
    token = jwt.encode({"sub": "user_2abc", "type": "access"}, "some-other-key", algorithm="HS256")
    assert security.decode_access_token(token) is None
    assert BearerTokenIdentityResolver(token).resolve() is None


def test_wrong_token_type():
    token = security.create_access_token("user_2abc", type="refresh")
    assert BearerTokenIdentityResolver(token).resolve() is None


def test_garbage_token():
    assert BearerTokenIdentityResolver("not-a-jwt").resolve() is None
