import typing


CallbackType = typing.Callable[..., typing.Any]


class EventEmitter:

	"""
	A minimal synchronous event emitter.

	Phrases use it to notify listeners after a change has been applied in
	full. Callbacks run on the caller's thread, in registration order.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty event registry.
		"""

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		if event_name not in self._listeners:
			self._listeners[event_name] = []

		self._listeners[event_name].append(callback)


	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if event_name not in self._listeners or callback not in self._listeners[event_name]:
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def has_listeners (self, event_name: str) -> bool:

		return bool(self._listeners.get(event_name))


	def emit (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Call every listener of ``event_name`` with the given arguments.

		Listeners may unregister themselves while being called.
		"""

		if event_name not in self._listeners:
			return

		for callback in list(self._listeners[event_name]):
			callback(*args, **kwargs)
