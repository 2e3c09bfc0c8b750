import pytest

from database.db_manager import DatabaseManager
from database.query_client import QueryClient
from database.transaction_dao import TransactionDAO
from services.export_service import ExportService
from services.report_service import ReportService
from services.summary_service import SummaryService
from services.transaction_service import TransactionService


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "porket.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def client(db):
    return QueryClient(db)


@pytest.fixture
def tx_dao(client):
    return TransactionDAO(client)


@pytest.fixture
def tx_service(tx_dao):
    return TransactionService(tx_dao)


@pytest.fixture
def summary_service(tx_dao):
    return SummaryService(tx_dao)


@pytest.fixture
def report_service(tx_dao):
    return ReportService(tx_dao)


@pytest.fixture
def export_service(tx_dao):
    return ExportService(tx_dao)
