import logging

import pytest
from fastapi import FastAPI

import src.app.use_cases.auth as auth_use_cases
from src.api.app import build_lifespan
from src.domain.credentials import CredentialError


class BootstrapConfig:
    AUTO_CREATE_TABLES = False
    DEFAULT_ADMIN_EMAIL = "admin@acme.com"
    DEFAULT_ADMIN_PASSWORD = "x" * 73


class RejectingBootstrap:
    def __init__(self, uow):
        self.uow = uow

    async def execute(self, email, password):
        raise CredentialError("Password exceeds 72 bytes")


@pytest.mark.asyncio
async def test_unusable_admin_password_is_logged_before_startup_fails(monkeypatch, caplog):
    monkeypatch.setattr(auth_use_cases, "BootstrapAdminUseCase", RejectingBootstrap)
    lifespan = build_lifespan(BootstrapConfig)

    with caplog.at_level(logging.ERROR, logger="src.api.app"):
        with pytest.raises(CredentialError):
            async with lifespan(FastAPI()):
                pass

    assert "DEFAULT_ADMIN_PASSWORD is not usable" in caplog.text
    assert "72 bytes" in caplog.text
