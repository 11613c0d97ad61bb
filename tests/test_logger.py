"""
Tests for the counting Logger.
"""

import logging

from optionstore import Logger, Reporter


class TestLogger:
    """Test counting and forwarding of reports."""

    def test_counts_errors(self):
        logger = Logger()
        assert not logger.has_errors()
        logger.error("bad")
        logger.report_error("worse")
        assert logger.has_errors()
        assert logger.error_count == 2

    def test_reset_errors(self):
        logger = Logger()
        logger.error("bad")
        logger.reset_errors()
        assert not logger.has_errors()

    def test_counts_warnings_separately(self):
        logger = Logger()
        logger.warn("hmm")
        assert logger.has_warnings()
        assert not logger.has_errors()
        logger.reset_warnings()
        assert not logger.has_warnings()

    def test_forwards_to_logging(self, caplog):
        """Should emit records on the optionstore logger."""
        logger = Logger()
        with caplog.at_level(logging.INFO, logger="optionstore"):
            logger.error("duplicate")
            logger.warn("careful")
            logger.info("hello")

        levels = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "optionstore"]
        assert levels == [
            (logging.ERROR, "duplicate"),
            (logging.WARNING, "careful"),
            (logging.INFO, "hello"),
        ]

    def test_duplicate_declaration_is_logged(self, caplog, options):
        from optionstore import BooleanDeclarationOption

        with caplog.at_level(logging.ERROR, logger="optionstore"):
            options.add_declaration(BooleanDeclarationOption(name="emit"))

        assert any("emit" in r.getMessage() for r in caplog.records)

    def test_satisfies_reporter(self):
        assert isinstance(Logger(), Reporter)

    def test_reporter_requires_full_contract(self):
        """Should not accept an object missing the warning side of the contract."""

        class ErrorsOnly:
            def error(self, message): ...

            def warn(self, message): ...

            def has_errors(self):
                return False

            def reset_errors(self): ...

        assert not isinstance(ErrorsOnly(), Reporter)
        for method in ["info", "has_warnings", "reset_warnings"]:
            assert hasattr(Reporter, method)
