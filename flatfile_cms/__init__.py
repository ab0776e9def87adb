from flask import Flask

import configparser
import logging
import os

from . import utils

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger=logging.getLogger(__name__)

config_path=os.environ.get("FLATFILE_CMS_CONFIG","serverconfig.cfg")
appconfig=configparser.ConfigParser()
if not appconfig.read(config_path):
    raise ValueError("Config file {} could not be read".format(config_path))

if not utils.check_if_exists(appconfig, "Flask", "secret_key"):
    raise ValueError("Config file must have [Flask] section with secret_key value")

app=Flask(__name__)
app.config["DEBUG"]=appconfig.getboolean("Flask","debug",fallback=False)
app.config["SECRET_KEY"]=appconfig["Flask"]["secret_key"]

app.config["DATA_PATH"]=os.path.abspath(utils.read_if_exists(appconfig,"cms","data_path","data"))
app.config["USERS_PATH"]=os.path.abspath(utils.read_if_exists(appconfig,"cms","users_path","users.yml"))
app.config["HOST"]=utils.read_if_exists(appconfig,"cms","host","127.0.0.1")
app.config["PORT"]=int(utils.read_if_exists(appconfig,"cms","port",5000))

# argon2 memory cost is in KiB
app.config["ARGON2_ROUNDS"]=int(utils.read_if_exists(appconfig,"passlib","argon2_rounds",4))
app.config["ARGON2_MEMORY_COST"]=int(utils.read_if_exists(appconfig,"passlib","argon2_memory_cost",64*1024))

logger.info("Serving documents from %s", app.config["DATA_PATH"])

from flatfile_cms import routes
_ = routes
