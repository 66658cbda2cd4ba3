import sys
import logging
from push_relay import create_app
from push_relay.errors import ConfigError

# Konfiguracja logowania (na produkcji logi idą do Gunicorna)
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# UWAGA: subskrypcja jest trzymana w RAM procesu, więc Gunicorn musi
# działać z 1 workerem (wątki są OK - store ma lock).
try:
    app = create_app()
except ConfigError as e:
    logging.getLogger(__name__).critical(f"❌ {e}")
    sys.exit(1)

# Gunicorn szuka zmiennej 'app' w tym pliku
