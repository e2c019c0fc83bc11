"""
Unit tests for the Logger.io decorator helpers

Covers sensitive value masking, content truncation and the logged marker
set on exceptions so they are not logged twice while bubbling up.
"""

import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import MAX_CONTENT_LENGTH
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMaskSensitive:
    def test_masks_keyword_in_repr(self) -> None:
        assert mask_sensitive("Card(card_number='4111111111111111')") == "Card(card_number='********')"

    def test_leaves_other_values_untouched(self) -> None:
        value = {'account_id': 1}
        assert mask_sensitive(value) is value

    def test_should_mask_keyword(self) -> None:
        assert should_mask_keyword('password', 'hunter2') == '********'
        assert should_mask_keyword('account_id', 10) == 10


@pytest.mark.unit
class TestTruncateContent:
    def test_short_content_unchanged(self) -> None:
        assert truncate_content('short') == 'short'

    def test_long_content_truncated(self) -> None:
        result = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))
        assert result.startswith('x' * MAX_CONTENT_LENGTH)
        assert result.endswith('<truncated 10 chars>')


@pytest.mark.unit
class TestNormalizeArgsKwargs:
    def test_drops_unknown_kwargs(self) -> None:
        def func(a: int, *, b: int) -> None: ...

        args, kwargs = normalize_args_kwargs(func, 1, b=2, c=3)

        assert args == (1,)
        assert kwargs == {'b': 2}


@pytest.mark.unit
class TestLoggerIo:
    def test_returns_value(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3

    def test_reraises_and_marks_exception(self) -> None:
        @Logger.io
        def fail() -> None:
            raise DomainError('boom')

        with pytest.raises(DomainError) as exc_info:
            fail()

        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_swallows_when_reraise_disabled(self) -> None:
        @Logger.io(reraise=False)
        def fail() -> int:
            raise ValueError('boom')

        assert fail() is None
