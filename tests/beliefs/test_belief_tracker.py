"""Tests for belief tracking."""

from beliefs import BeliefTracker
from storage import StorageKeys


def test_add_belief(kv, clock):
    tracker = BeliefTracker(kv, clock=clock)
    belief = tracker.add_belief("Remote work", "Offices are essential")

    assert belief.initial_position == belief.current_position == "Offices are essential"
    assert belief.date_added == belief.last_updated == clock()
    assert tracker.get(belief.id) == belief
    assert len(kv.get_json(StorageKeys.TRACKED_BELIEFS)) == 1


def test_ids_unique(kv, clock):
    tracker = BeliefTracker(kv, clock=clock)
    a = tracker.add_belief("A", "x")
    b = tracker.add_belief("B", "y")
    assert a.id != b.id


def test_update_records_change(kv, clock):
    tracker = BeliefTracker(kv, clock=clock)
    belief = tracker.add_belief("Remote work", "Offices are essential")
    later = clock.advance(days=3)

    change = tracker.update_belief(belief.id, "Offices are optional", trigger_fact="Remote teams...")

    assert change.from_position == "Offices are essential"
    assert change.to_position == "Offices are optional"
    assert change.trigger_fact == "Remote teams..."
    assert change.date == later
    updated = tracker.get(belief.id)
    assert updated.current_position == "Offices are optional"
    assert updated.initial_position == "Offices are essential"
    assert updated.last_updated == later


def test_change_history_in_order(kv, clock):
    tracker = BeliefTracker(kv, clock=clock)
    belief = tracker.add_belief("Topic", "one")
    tracker.update_belief(belief.id, "two")
    tracker.update_belief(belief.id, "three")
    other = tracker.add_belief("Other", "a")
    tracker.update_belief(other.id, "b")

    history = tracker.changes_for(belief.id)
    assert [(c.from_position, c.to_position) for c in history] == [("one", "two"), ("two", "three")]


def test_update_unknown_belief(kv, clock):
    tracker = BeliefTracker(kv, clock=clock)
    assert tracker.update_belief("missing", "anything") is None
    assert tracker.changes == []


def test_reload(kv, clock):
    tracker = BeliefTracker(kv, clock=clock)
    belief = tracker.add_belief("Topic", "one")
    tracker.update_belief(belief.id, "two")

    reloaded = BeliefTracker(kv, clock=clock)
    assert reloaded.get(belief.id).current_position == "two"
    assert len(reloaded.changes_for(belief.id)) == 1


def test_corrupt_storage(kv, clock):
    kv.set_json(StorageKeys.TRACKED_BELIEFS, [{"topic": "no dates"}])
    assert BeliefTracker(kv, clock=clock).beliefs == []
