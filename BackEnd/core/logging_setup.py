import logging
import logging.handlers

from BackEnd.core.paths import logs_dir

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def configure_logging(level=logging.INFO, log_file=None):
	"""Console logging plus a rotating file in the user log dir."""
	handlers = [logging.StreamHandler()]
	file_error = None
	try:
		path = log_file or (logs_dir() / "study_tracker.log")
		handlers.append(logging.handlers.RotatingFileHandler(
			path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"))
	except OSError as e:
		file_error = e
	logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
	if file_error is not None:
		# console-only when the data dir is not writable
		logging.getLogger(__name__).warning("File logging disabled: %s", file_error)
