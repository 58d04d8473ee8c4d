"""Custom exceptions for sqlitemaster."""


class SQLiteMasterError(Exception):
    """Base exception for all sqlitemaster errors."""

    pass


class ConnectionError(SQLiteMasterError):
    """The supplied database connection is unusable."""

    pass


class ConfigurationError(SQLiteMasterError):
    """Error in configuration or parameters."""

    pass


class QueryError(SQLiteMasterError):
    """Error reading the schema catalog."""

    pass


class StatementExecutionError(SQLiteMasterError):
    """Error executing a DDL statement."""

    def __init__(self, message: str, statement: str):
        super().__init__(message)
        self.statement = statement
