# Module for setting up the configurations

import logging
import yaml
import collections.abc


logger = logging.getLogger(__name__)

# function to recursively update a nested dictionary with another dictionary
def update(d, u):
    """
    Recursively update a nested dictionary with another dictionary

    Keyword arguments:
        d [dict] : dictionary to be updated
        u [dict] : dictionary used to update the items in d

    Returns:
        d [dict] : updated dictionary d

    """
    if u is not None:
        for k, v in u.items():
            if isinstance(d, collections.abc.Mapping):
                if isinstance(v, collections.abc.Mapping):
                    r = update(d.get(k, {}), v)
                    d[k] = r
                else:
                    d[k] = u[k]
            else:
                d = {k: u[k]}
    return d


class Config:

    def __init__(self,config_yaml=None):
        """
        Setup the configurations for the nutation calculations

        Keyword arguments:
            config_yaml [str], optional  : YAML configuration file

        Updates:
            self.config [dict]           : configurations
        """
        # Set the defaults
        config = {
                'process': {
                    'verbose': 'INFO'
                    },
                'ephemeris': {
                    'ephem_method': 'IAU_2006',
                    'correct_for_eop': False,
                    'use_vondrak_2011': False
                    },
                'eop': {
                    'eop_file_iau1980': None,
                    'eop_file_iau2000': None,
                    'interp_window': 4.0
                    }
                }

        # If a configuration yaml file is given, update the configurations
        if config_yaml is not None:

            # Check the given config_yaml filename
            if not isinstance(config_yaml,str):
                logger.error("The given yaml config file must be a string",
                                stack_info=True)
                raise TypeError("The given yaml config file name must be a "
                                "string")

            # Try to open the yaml file
            try:
                with open(config_yaml, 'r') as stream:
                    yaml_parsed = yaml.load(stream, Loader=yaml.SafeLoader)
            except IOError:
                logger.error(f"The configuration yaml file {config_yaml} is"
                            f" not accessible!",stack_info=True)
                raise IOError(f"File {config_yaml} not accessible!")
            except yaml.YAMLError as e:
                logger.error(f"Error loading YAML file {config_yaml}: {e}",
                             stack_info=True)
                raise

            # update the configurations
            config = update(config,yaml_parsed)

        # Update the attribute
        self.config = config
