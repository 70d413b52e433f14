from datetime import timedelta

import redis
from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from shortener.application.common.clock import SystemClock
from shortener.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from shortener.application.identity.use_cases.login_user_use_case import LoginUserUseCase
from shortener.application.identity.use_cases.logout_user_use_case import LogoutUserUseCase
from shortener.application.identity.use_cases.refresh_token_use_case import RefreshTokenUseCase
from shortener.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from shortener.application.shortening.use_cases.resolve_url_use_case import ResolveUrlUseCase
from shortener.application.shortening.use_cases.shorten_url_use_case import ShortenUrlUseCase
from shortener.config import get_settings
from shortener.domain.shortening.services.code_generator import RandomCodeGenerator
from shortener.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from shortener.infrastructure.identity.auth.hmac_token_digester import HmacTokenDigester
from shortener.infrastructure.identity.auth.password_service import PasswordService
from shortener.infrastructure.identity.auth.refresh_secret_generator import (
    RandomRefreshSecretGenerator,
)
from shortener.infrastructure.identity.auth.token_service import JwtAccessTokenService
from shortener.infrastructure.identity.repositories.session_repository import SessionRepository
from shortener.infrastructure.identity.repositories.user_repository import UserRepository
from shortener.infrastructure.shortening.repositories.redis_short_url_repository import (
    RedisShortUrlRepository,
)
from shortener.infrastructure.shortening.repositories.short_url_repository import (
    ShortUrlRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Callable(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    clock = providers.Singleton(SystemClock)
    uow = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Shortening repositories and services
    redis_client = providers.Singleton(
        redis.Redis.from_url,
        settings.provided.REDIS_URL,
        decode_responses=True,
        socket_timeout=settings.provided.REDIS_SOCKET_TIMEOUT_SECONDS,
    )
    sql_short_url_repository = providers.Factory(ShortUrlRepository, db=db)
    redis_short_url_repository = providers.Factory(
        RedisShortUrlRepository,
        client=redis_client,
        anonymous_ttl=providers.Factory(timedelta, days=settings.provided.ANONYMOUS_URL_TTL_DAYS),
    )
    short_url_repository = providers.Selector(
        settings.provided.STORE_BACKEND,
        sql=sql_short_url_repository,
        redis=redis_short_url_repository,
    )
    code_generator = providers.Singleton(
        RandomCodeGenerator, length=settings.provided.SHORT_CODE_LENGTH
    )

    # Identity repositories and services
    user_repository = providers.Factory(UserRepository, db=db)
    session_repository = providers.Factory(SessionRepository, db=db)
    password_service = providers.Singleton(
        PasswordService, pepper=settings.provided.PASSWORD_PEPPER
    )
    access_token_service = providers.Singleton(
        JwtAccessTokenService,
        secret_key=settings.provided.SECRET_KEY,
        expire_minutes=settings.provided.ACCESS_TOKEN_EXPIRE_MINUTES,
        issuer=settings.provided.ACCESS_TOKEN_ISSUER,
        audience=settings.provided.ACCESS_TOKEN_AUDIENCE,
    )
    token_digester = providers.Singleton(
        HmacTokenDigester,
        secret=settings.provided.REFRESH_TOKEN_SECRET,
        algorithm=settings.provided.REFRESH_TOKEN_DIGEST_ALGORITHM,
    )
    refresh_secret_generator = providers.Singleton(RandomRefreshSecretGenerator)
    session_ttl = providers.Factory(timedelta, days=settings.provided.SESSION_TTL_DAYS)

    # Shortening use cases
    shorten_url_use_case = providers.Factory(
        ShortenUrlUseCase,
        short_url_repository=short_url_repository,
        uow=uow,
        code_generator=code_generator,
        max_attempts=settings.provided.SHORT_CODE_MAX_ATTEMPTS,
    )
    resolve_url_use_case = providers.Factory(
        ResolveUrlUseCase,
        short_url_repository=short_url_repository,
    )

    # Identity use cases
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        uow=uow,
        clock=clock,
    )
    login_user_use_case = providers.Factory(
        LoginUserUseCase,
        user_repository=user_repository,
        session_repository=session_repository,
        password_service=password_service,
        access_token_service=access_token_service,
        token_digester=token_digester,
        refresh_secret_generator=refresh_secret_generator,
        uow=uow,
        clock=clock,
        session_ttl=session_ttl,
        secret_length=settings.provided.SESSION_SECRET_LENGTH,
    )
    refresh_token_use_case = providers.Factory(
        RefreshTokenUseCase,
        session_repository=session_repository,
        access_token_service=access_token_service,
        token_digester=token_digester,
        refresh_secret_generator=refresh_secret_generator,
        uow=uow,
        clock=clock,
        secret_length=settings.provided.SESSION_SECRET_LENGTH,
    )
    logout_user_use_case = providers.Factory(
        LogoutUserUseCase,
        session_repository=session_repository,
        token_digester=token_digester,
        uow=uow,
        clock=clock,
    )
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
    )


container = Container()
