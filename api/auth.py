import logging

from schemas.auth import AuthResponse, LoginRequest, Principal, SignupRequest
from api.base import parse_response
from services.request_executor import RequestError, RequestExecutor

logger = logging.getLogger(__name__)


class AuthApi:
    """
    Login and signup write the returned token and admin into the session store
    as part of the call; callers never persist credentials themselves.
    """

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    @property
    def session(self):
        return self.executor.session

    async def login(self, email: str, password: str) -> AuthResponse:
        body = LoginRequest(email=email, password=password).to_fields()
        data = await self.executor.post("/auth/login", body=body, fallback_message="Login failed")
        return self._start_session(data, "Login failed")

    async def signup(self, username: str, email: str, password: str) -> AuthResponse:
        body = SignupRequest(username=username, email=email, password=password).to_fields()
        data = await self.executor.post("/auth/signup", body=body, fallback_message="Signup failed")
        return self._start_session(data, "Signup failed")

    async def me(self) -> Principal:
        data = await self.executor.get("/auth/me", fallback_message="Failed to fetch user")
        admin = data.get("admin")
        if admin is None:
            raise RequestError("Failed to fetch user", payload=data)
        return parse_response(Principal, admin, "Failed to fetch user", data)

    def logout(self) -> None:
        self.session.clear()

    def _start_session(self, data: dict, fallback: str) -> AuthResponse:
        response = parse_response(AuthResponse, data, fallback, data)
        if response.token:
            if response.admin is None:
                raise RequestError("Authentication response did not include the admin profile", payload=data)
            self.session.set(response.token, response.admin)
        else:
            logger.info("Authentication succeeded without a token; session left unchanged")
        return response
