import argparse
import logging
import time
import numpy as np
from iaunut.setup_logging import setup_logging
from iaunut.ephemeris import ephemeris_from_config,reduction_method
from iaunut.fundamental import ARCSEC_TO_RAD
import iaunut.settings as settings
import iaunut.nutation as nutation
import iaunut.eop as eop
import iaunut.timescale as timescale


logger = logging.getLogger(__name__)


def main(argv=None):

    # Parse command line arguments
    parser = argparse.ArgumentParser(prog='iaunut', description =
                        "Nutation in longitude and obliquity for a Julian "
                        "day in TT",
                        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('jd',metavar='jd',nargs=1,type=float,
                        help='Julian day in TT')
    parser.add_argument('-m','--method',nargs=1,dest='method',
                        help=('Reduction method (e.g. IAU_1976, IAU_2000, '
                              'IAU_2006); overrides the configurations'))
    parser.add_argument('--eop',action='store_true',dest='eop',
                        help=('Correct for the celestial pole offsets of the '
                              'Earth orientation parameters'))
    parser.add_argument('-c','--config',nargs=1, dest = 'config_yaml',
                help = ('YAML file containing configurations'))
    parser.add_argument('--vector',nargs='+',type=float,dest='vector',
                        help=('Equatorial vector x y z [vx vy vz] to nutate '
                              'from mean to true coordinates'))
    parser.add_argument('--true-to-mean',action='store_true',
                        dest='true_to_mean',
                        help='Nutate the vector from true to mean coordinates')
    args = parser.parse_args(argv)

    jd_tt = args.jd[0]

    # Setup the configurations by reading the yaml file
    if args.config_yaml is not None:
        config_yaml = str(args.config_yaml[0])
        config = settings.Config(config_yaml).config
    else:
        # if no config file specified, use the defaults
        config = settings.Config().config

    # verbose mode
    verbose = config['process']['verbose']
    allowed_verbose = ['INFO','DEBUG']
    if verbose not in allowed_verbose:
        logger.error(f"\nVerbose mode must be one of {allowed_verbose}\n",
                     stack_info=True)
        raise ValueError(f"Verbose mode {verbose} not recognized!")

    # Setup the logging using logging.yaml
    setup_logging()
    logging.getLogger().setLevel(verbose)

    # Command line options override the configurations
    if args.method is not None:
        config['ephemeris']['ephem_method'] = reduction_method(args.method[0])
    if args.eop:
        config['ephemeris']['correct_for_eop'] = True
    eph = ephemeris_from_config(config)
    logger.debug(f"Ephemeris properties: {eph}")

    context = nutation.NutationContext(
                                eop_provider=eop.provider_from_config(config))

    # time measurements
    pc0 = time.perf_counter()
    pt0 = time.process_time()

    t = timescale.to_centuries(jd_tt)
    nut = nutation.calc_nutation(t,eph,context)
    print(f"dpsi = {nut.longitude/ARCSEC_TO_RAD:.6f} arcsec")
    print(f"deps = {nut.obliquity/ARCSEC_TO_RAD:.6f} arcsec")

    if args.vector is not None:
        out = nutation.nutate_in_equatorial_coordinates(
                        jd_tt,eph,args.vector,not args.true_to_mean,context)
        print("vector = " + np.array2string(out,precision=12))

    # time measurements
    pc1 = time.perf_counter() - pc0
    pt1 = time.process_time() - pt0
    logger.debug(f"Performance counter spent: {pc1}")
    logger.debug(f"Process time spent: {pt1}")


if __name__ == '__main__':
    main()
