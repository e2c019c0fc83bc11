"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the loguru
sinks are configured at import time and read TEST_LOG_DIR.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (  # noqa: E402
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (  # noqa: E402
    ITicketPaymentService,
)


@pytest.fixture
def mock_payment_service() -> Mock:
    """Mock payment gateway"""
    return Mock(spec=ITicketPaymentService)


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    """Mock seat booking system"""
    return Mock(spec=ISeatReservationService)
