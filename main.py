import logging

from tgproxy.constants import APP_PORT, DEBUG_MODE
from tgproxy.controller import create_app

logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()

if __name__ == '__main__':
    logging.getLogger(__name__).info(f"Webhook server running on port {APP_PORT}")
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE, threaded=True)
