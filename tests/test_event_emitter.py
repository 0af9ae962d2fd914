import pytest

import tempofeel.event_emitter


def test_on_and_emit () -> None:

	"""Registered callbacks are called on emit."""

	emitter = tempofeel.event_emitter.EventEmitter()
	received: list = []

	emitter.on("notes_replaced", lambda v: received.append(v))
	emitter.emit("notes_replaced", 42)

	assert received == [42]


def test_emit_without_listeners_is_noop () -> None:

	emitter = tempofeel.event_emitter.EventEmitter()

	emitter.emit("notes_added", 1)

	assert not emitter.has_listeners("notes_added")


def test_callbacks_run_in_registration_order () -> None:

	emitter = tempofeel.event_emitter.EventEmitter()
	order: list = []

	emitter.on("tick", lambda: order.append("a"))
	emitter.on("tick", lambda: order.append("b"))
	emitter.emit("tick")

	assert order == ["a", "b"]


def test_off_removes_callback () -> None:

	"""off() prevents a previously registered callback from being called."""

	emitter = tempofeel.event_emitter.EventEmitter()
	received: list = []

	def cb (v: int) -> None:
		received.append(v)

	emitter.on("tick", cb)
	emitter.off("tick", cb)
	emitter.emit("tick", 1)

	assert received == []
	assert not emitter.has_listeners("tick")


def test_off_only_removes_target_callback () -> None:

	"""off() leaves other callbacks for the same event intact."""

	emitter = tempofeel.event_emitter.EventEmitter()
	a: list = []
	b: list = []

	def cb_a (v: int) -> None:
		a.append(v)

	def cb_b (v: int) -> None:
		b.append(v)

	emitter.on("tick", cb_a)
	emitter.on("tick", cb_b)
	emitter.off("tick", cb_a)
	emitter.emit("tick", 7)

	assert a == []
	assert b == [7]


def test_off_raises_for_unregistered_callback () -> None:

	"""off() raises ValueError when the callback was never registered."""

	emitter = tempofeel.event_emitter.EventEmitter()

	with pytest.raises(ValueError, match="tick"):
		emitter.off("tick", lambda: None)


def test_off_raises_after_already_removed () -> None:

	emitter = tempofeel.event_emitter.EventEmitter()

	def cb () -> None:
		pass

	emitter.on("tick", cb)
	emitter.off("tick", cb)

	with pytest.raises(ValueError):
		emitter.off("tick", cb)


def test_listener_may_unregister_itself () -> None:

	"""A callback removing itself during emit does not skip the next one."""

	emitter = tempofeel.event_emitter.EventEmitter()
	calls: list = []

	def once () -> None:
		calls.append("once")
		emitter.off("tick", once)

	emitter.on("tick", once)
	emitter.on("tick", lambda: calls.append("always"))

	emitter.emit("tick")
	emitter.emit("tick")

	assert calls == ["once", "always", "always"]
