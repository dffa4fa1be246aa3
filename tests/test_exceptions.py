"""Tests for the exception hierarchy and its package re-exports."""

from table_print.exceptions import InputError, OptionsError, TablePrintError


class TestExceptionHierarchy:
    def test_base_is_exception(self):
        assert issubclass(TablePrintError, Exception)

    def test_options_error_is_table_print_error(self):
        assert issubclass(OptionsError, TablePrintError)

    def test_input_error_is_table_print_error(self):
        assert issubclass(InputError, TablePrintError)

    def test_exit_codes(self):
        assert TablePrintError.exit_code == 1
        assert OptionsError.exit_code == 1
        assert InputError.exit_code == 2


class TestReExports:
    def test_init_re_exports(self):
        from table_print import InputError as InitInputError
        from table_print import OptionsError as InitOptionsError
        from table_print import TablePrintError as InitTablePrintError

        assert InitTablePrintError is TablePrintError
        assert InitOptionsError is OptionsError
        assert InitInputError is InputError
