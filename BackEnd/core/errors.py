class ValidationError(ValueError):
	"""A study session field failed validation; nothing was stored."""

	def __init__(self, field, reason):
		super().__init__(f"{field}: {reason}")
		self.field = field
		self.reason = reason


class PersistenceError(RuntimeError):
	"""Reading or writing durable storage failed."""
