"""Tests for calclex utility modules."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from calclex.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "calclex.mymodule"

    def test_logger_with_calclex_prefix(self) -> None:
        from calclex.utils.logger import get_logger

        logger = get_logger("calclex.validator")
        assert logger.name == "calclex.validator"

    def test_logger_name_starting_with_calclex_not_submodule(self) -> None:
        """Names starting with 'calclex' but not submodules should get prefix."""
        from calclex.utils.logger import get_logger

        logger = get_logger("calclex_other")
        assert logger.name == "calclex.calclex_other"

    def test_logger_exact_calclex_name(self) -> None:
        """The exact name 'calclex' should not get double-prefixed."""
        from calclex.utils.logger import get_logger

        logger = get_logger("calclex")
        assert logger.name == "calclex"

    def test_reexported_from_utils(self) -> None:
        from calclex.utils import get_logger
        from calclex.utils.logger import get_logger as direct

        assert get_logger is direct

    def test_validator_logger_in_namespace(self) -> None:
        """The validator logs under calclex, so one level switch covers it."""
        import logging

        from calclex import validator

        assert validator.logger.name == "calclex.validator"
        assert validator.logger.parent is logging.getLogger("calclex")
