import sys
import logging
from push_relay import create_app
from push_relay.errors import ConfigError

# Logowanie konfigurujemy PRZED wszystkim innym
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

try:
    app = create_app()
except ConfigError as e:
    logger.critical(f"❌ {e}")
    sys.exit(1)

if __name__ == "__main__":
    port = app.config["PORT"]
    logger.info(f"Serwer nasłuchuje na porcie {port}")
    app.run(host='0.0.0.0', port=port, debug=False)
