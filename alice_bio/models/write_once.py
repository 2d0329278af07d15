from sqlalchemy import event, inspect

from alice_bio.db.errors import ImmutableRecordError


def _refuse_update(mapper, connection, target) -> None:
    changed = [attr.key for attr in inspect(target).attrs if attr.history.has_changes()]
    if changed:
        raise ImmutableRecordError(
            f"{mapper.local_table.name} rows are write-once; refused change to {', '.join(sorted(changed))}"
        )


def write_once(cls):
    event.listen(cls, "before_update", _refuse_update)
    return cls
