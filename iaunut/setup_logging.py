# Setup of the logging for the command line tool

import os
import logging.config
import yaml

def setup_logging(
    default_path=None,
    default_level=logging.INFO,
    env_key='IAUNUT_LOG_CFG'
):
    """Setup logging configuration from a yaml file

    The file given by the environment variable env_key takes precedence over
    default_path, which is the logging.yaml shipped with the package if not
    given. Without a readable file, basicConfig is used with default_level
    """

    if not default_path:
        package_dir = os.path.dirname(os.path.abspath(__file__))
        default_path = os.path.join(package_dir, 'logging.yaml')

    path = os.getenv(env_key, default_path)

    if os.path.exists(path):
        with open(path, 'rt') as f:
            config = yaml.safe_load(f.read())
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(level=default_level)
