from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.models.counters import Counter

UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _locked_counter(db: Session, name: str):
    return (
        db.query(Counter)
        .filter(Counter.name == name)
        .with_for_update()
        .first()
    )


def _create_counter(db: Session, name: str) -> None:
    # Concurrent first inserts for the same name must not fail on the primary key.
    insert = UPSERT_INSERTS.get(db.get_bind().dialect.name)
    if insert is not None:
        db.execute(
            insert(Counter)
            .values(name=name, seq=0)
            .on_conflict_do_nothing(index_elements=["name"])
        )
        return

    try:
        with db.begin_nested():
            db.add(Counter(name=name, seq=0))
    except IntegrityError:
        # another transaction created it first
        pass


def next_sequence_value(db: Session, name: str) -> int:
    """Reserve the next value of the named sequence inside the caller's transaction.

    Values start at 1, only ever increase and are never handed out twice, even
    when the row that used one is later deleted.
    """
    counter = _locked_counter(db, name)
    if counter is None:
        _create_counter(db, name)
        counter = _locked_counter(db, name)

    counter.seq += 1
    db.flush()
    return counter.seq
