"""contentops - link-processing statistics and reporting."""

import logging

__version__ = "0.1.0"

# Library logging stays silent until the driver calls utils.configure_logging()
logging.getLogger("contentops").addHandler(logging.NullHandler())
