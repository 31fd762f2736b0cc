import logging
import sys

from blogsite.main import app
from blogsite.services.static_exporter import StaticExporter
from blogsite.settings import settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        result = StaticExporter(app, settings).export()
        logger.info(f"Build completed successfully: {result.output_dir}")
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        sys.exit(1)
