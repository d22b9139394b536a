"""Shared pytest fixtures for spendbook tests."""

import logging
import tempfile
import os
import pytest

from spendbook import logging_setup
from spendbook.database.factories import create_sqlite_database
from spendbook.domain.account import AccountService
from spendbook.domain.category import CategoryService
from spendbook.domain.csv_import import CSVImportService
from spendbook.domain.transaction import TransactionService

TEST_USER = "user_1"
OTHER_USER = "user_2"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_id():
    return TEST_USER


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a CSVImportService with a temporary database."""
    return CSVImportService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create a sample account owned by TEST_USER."""
    account_id = account_service.create_account(user_id=TEST_USER, name="Test Account")
    return account_service.get_account(account_id, TEST_USER)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI options pointing at the temporary database and test user."""
    return ["--db-path", temp_db.database_path, "--user", TEST_USER]


@pytest.fixture(autouse=True)
def isolate_logging(monkeypatch):
    """Undo the package logging configuration done by CLI invocations."""
    pkg_logger = logging.getLogger("spendbook")
    saved_handlers = list(pkg_logger.handlers)
    saved_level = pkg_logger.level
    saved_propagate = pkg_logger.propagate
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)

    yield pkg_logger

    pkg_logger.handlers[:] = saved_handlers
    pkg_logger.setLevel(saved_level)
    pkg_logger.propagate = saved_propagate
