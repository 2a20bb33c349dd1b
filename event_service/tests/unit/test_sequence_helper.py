from __future__ import annotations

from shared.core.database import SessionLocal
from shared.helpers import sequence_helper
from shared.helpers.sequence_helper import next_sequence_value
from shared.models.counters import Counter


def test_sequence_starts_at_one_and_increments(db_session) -> None:
    assert next_sequence_value(db_session, "event") == 1
    assert next_sequence_value(db_session, "event") == 2
    assert next_sequence_value(db_session, "guest") == 1
    db_session.commit()


def test_counter_created_by_a_concurrent_request_is_reused(db_session, monkeypatch) -> None:
    real_lookup = sequence_helper._locked_counter
    lookups = []

    def lookup_after_competing_insert(db, name):
        if not lookups:
            # another request inserts and commits the counter after our first lookup
            other = SessionLocal()
            try:
                other.add(Counter(name=name, seq=4))
                other.commit()
            finally:
                other.close()
            lookups.append(name)
            return None
        lookups.append(name)
        return real_lookup(db, name)

    monkeypatch.setattr(sequence_helper, "_locked_counter", lookup_after_competing_insert)

    assert next_sequence_value(db_session, "coupon_code") == 5
    db_session.commit()
    assert db_session.query(Counter).filter(Counter.name == "coupon_code").one().seq == 5
