"""Run the nodeid gateway: python -m nodeid"""

import logging

import uvicorn

from nodeid.config import load_config

config = load_config()
logging.basicConfig(level=config.log_level)
uvicorn.run("nodeid.app:create_app", host=config.host, port=config.port, factory=True)
