import logging
import uvicorn
from config import ApplicationConfig
from src.api.app import create_app
from src.adapter.services.runtime_log_handler import install_process_error_handlers

logging.basicConfig(
    level=ApplicationConfig.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(ApplicationConfig)
install_process_error_handlers(app.state.persist_log)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=True,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
