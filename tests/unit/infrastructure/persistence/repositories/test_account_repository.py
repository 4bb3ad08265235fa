"""Unit tests for AccountRepository."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from latchkey.domain.entities import Role
from latchkey.domain.exceptions import DuplicateEmailError, StorageUnavailableError
from latchkey.infrastructure.persistence.models import AccountModel
from latchkey.infrastructure.persistence.repositories import AccountRepository


@pytest.fixture
def repository(db_session):
    return AccountRepository(db_session, timeout=5)


async def _count_accounts(session: AsyncSession) -> int:
    result = await session.execute(select(func.count(AccountModel.id)))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_insert_assigns_id_and_timestamps(repository):
    account = await repository.insert(
        name="Ann", email="ann@example.com", password_hash="$argon2id$hash", role=Role.USER
    )

    assert account.id == 1
    assert account.name == "Ann"
    assert account.email == "ann@example.com"
    assert account.role is Role.USER
    assert account.created_at is not None
    assert account.updated_at is not None


@pytest.mark.asyncio
async def test_insert_default_role_is_user(repository):
    account = await repository.insert(
        name="Bob", email="bob@example.com", password_hash="$argon2id$hash"
    )

    assert account.role is Role.USER


@pytest.mark.asyncio
async def test_find_by_email(repository):
    await repository.insert(
        name="Ann", email="ann@example.com", password_hash="$argon2id$hash", role=Role.ADMIN
    )

    account = await repository.find_by_email("ann@example.com")

    assert account is not None
    assert account.role is Role.ADMIN
    assert account.password_hash == "$argon2id$hash"


@pytest.mark.asyncio
async def test_find_by_email_not_found_is_none(repository):
    assert await repository.find_by_email("nobody@example.com") is None


@pytest.mark.asyncio
async def test_find_by_email_is_case_sensitive(repository):
    await repository.insert(name="Ann", email="ann@example.com", password_hash="$argon2id$hash")

    assert await repository.find_by_email("ANN@example.com") is None


@pytest.mark.asyncio
async def test_find_by_id(repository):
    created = await repository.insert(
        name="Ann", email="ann@example.com", password_hash="$argon2id$hash"
    )

    assert (await repository.find_by_id(created.id)).email == "ann@example.com"
    assert await repository.find_by_id(999) is None


@pytest.mark.asyncio
async def test_email_exists(repository):
    assert await repository.email_exists("ann@example.com") is False

    await repository.insert(name="Ann", email="ann@example.com", password_hash="$argon2id$hash")

    assert await repository.email_exists("ann@example.com") is True


@pytest.mark.asyncio
async def test_duplicate_insert_relies_on_constraint(repository, db_session):
    """A second insert with the same email fails even without a pre-check."""
    await repository.insert(name="Ann", email="ann@example.com", password_hash="$argon2id$one")

    with pytest.raises(DuplicateEmailError):
        await repository.insert(
            name="Imposter", email="ann@example.com", password_hash="$argon2id$two"
        )

    assert await _count_accounts(db_session) == 1
    survivor = await repository.find_by_email("ann@example.com")
    assert survivor.name == "Ann"


@pytest.mark.asyncio
async def test_repository_usable_after_duplicate(repository, db_session):
    await repository.insert(name="Ann", email="ann@example.com", password_hash="$argon2id$one")
    with pytest.raises(DuplicateEmailError):
        await repository.insert(name="Ann", email="ann@example.com", password_hash="$argon2id$two")

    await repository.insert(name="Bob", email="bob@example.com", password_hash="$argon2id$three")

    assert await _count_accounts(db_session) == 2


@pytest.mark.asyncio
async def test_account_repr_hides_hash(repository):
    account = await repository.insert(
        name="Ann", email="ann@example.com", password_hash="$argon2id$secret-hash"
    )

    assert "secret-hash" not in repr(account)
    assert "password_hash" not in repr(account.sanitized())


@pytest.fixture
def mock_session():
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.mark.asyncio
async def test_find_by_email_store_failure(mock_session):
    mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
    repository = AccountRepository(mock_session)

    with pytest.raises(StorageUnavailableError) as exc_info:
        await repository.find_by_email("ann@example.com")

    assert exc_info.value.retryable is True


@pytest.mark.asyncio
async def test_insert_store_failure_rolls_back(mock_session):
    mock_session.flush.side_effect = OperationalError("INSERT", {}, Exception("down"))
    repository = AccountRepository(mock_session)

    with pytest.raises(StorageUnavailableError):
        await repository.insert(name="Ann", email="ann@example.com", password_hash="$argon2id$x")

    mock_session.rollback.assert_awaited_once()
    mock_session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_store_timeout_is_storage_unavailable(mock_session):
    async def slow_execute(*args, **kwargs):
        await asyncio.sleep(1)

    mock_session.execute.side_effect = slow_execute
    repository = AccountRepository(mock_session, timeout=0.01)

    with pytest.raises(StorageUnavailableError):
        await repository.find_by_email("ann@example.com")
