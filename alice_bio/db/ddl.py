from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable

from alice_bio.db.base import JOB_MODELS

DIALECTS = {
    "postgresql": postgresql.dialect,
    "sqlite": sqlite.dialect,
}


def render_schema_sql(dialect: str = "postgresql") -> str:
    """CREATE TABLE / CREATE INDEX text for the job tables, tables first."""
    if dialect not in DIALECTS:
        raise ValueError(f"Unsupported dialect {dialect!r}; use one of {', '.join(sorted(DIALECTS))}")
    target = DIALECTS[dialect]()
    tables = [model.__table__ for model in JOB_MODELS]

    statements = [str(CreateTable(t).compile(dialect=target)).strip() + ";" for t in tables]
    for table in tables:
        for index in sorted(table.indexes, key=lambda i: i.name):
            statements.append(str(CreateIndex(index).compile(dialect=target)).strip() + ";")
    return "\n\n".join(statements) + "\n"
