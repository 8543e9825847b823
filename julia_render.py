import os
import sys
from argparse import ArgumentParser
from pathlib import Path

_VERBOSE_FLAGS = {"--verbose", "-v"}
_cli_verbose = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])
_env_log_level = os.environ.get("TF_CPP_MIN_LOG_LEVEL")
_suppress_messages = (not _cli_verbose) and _env_log_level != "0"

if _suppress_messages and _env_log_level is None:
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "3"

VERBOSE = _cli_verbose


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


import tensorflow as tf


def configure_tf_logging(verbose):
    """Silence TensorFlow's Python logger unless running verbosely."""

    level = "INFO" if verbose else "ERROR"
    tf.get_logger().setLevel(level)
    for handler in tf.get_logger().handlers:
        handler.setLevel(level)


if _suppress_messages:
    configure_tf_logging(False)

from julia import (
    DEFAULT_CONSTANT_INDEX,
    JULIA_SETS,
    RenderParameters,
    render_frame,
    select_constant,
    write_render,
)
from julia.output import normalize_format


def select_device():
    """Place the computation on the first visible GPU, or on the CPU when there is none."""

    gpus = tf.config.list_physical_devices('GPU')
    if not gpus:
        log("No GPU found, using CPU")
        return '/CPU:0'
    try:
        for gpu in gpus:
            tf.config.experimental.set_memory_growth(gpu, True)
    except RuntimeError as e:
        log(e)
        return '/CPU:0'
    log("GPU found, using %s" % gpus[0].name)
    return '/GPU:0'


def build_parser():
    parser = ArgumentParser(description='Render a Julia set into blue and grayscale escape-time images.')

    parser.add_argument('--width', type=int,
                        dest='width', help='width of the output images in pixels',
                        metavar='WIDTH', default=8000)

    parser.add_argument('--height', type=int,
                        dest='height', help='height of the output images in pixels',
                        metavar='HEIGHT', default=6000)

    parser.add_argument('--constant-index', type=int,
                        dest='constant_index',
                        help='position of the constant c in the catalog (0-%d)' % (len(JULIA_SETS) - 1),
                        metavar='INDEX', default=DEFAULT_CONSTANT_INDEX)

    parser.add_argument('--max-iterations', type=int,
                        dest='max_iterations', help='number of iterations after which a point is deemed bounded',
                        metavar='MAX_ITERATIONS', default=2000)

    parser.add_argument('--escape-radius', type=float,
                        dest='escape_radius', help='magnitude beyond which a point is deemed unbounded',
                        metavar='RADIUS', default=2.0)

    parser.add_argument('--workers', type=int,
                        dest='workers', help='number of row bands rendered concurrently',
                        metavar='WORKERS', default=1)

    parser.add_argument('--output-dir', type=str,
                        dest='output_dir', help='directory receiving fractal-blue and fractal-white images',
                        metavar='OUTPUT_DIR', default='.')

    parser.add_argument('--format', type=str,
                        dest='format', help='file format of the images. Can be any extension supported by Pillow. Default: "png".',
                        metavar='FORMAT', default='png')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging, including TensorFlow and hardware diagnostics.')

    return parser


def resolve_parameters(opt, parser: ArgumentParser) -> RenderParameters:
    if opt.width <= 0 or opt.height <= 0:
        parser.error("--width and --height must be positive.")
    if opt.max_iterations < 0:
        parser.error("--max-iterations must not be negative.")
    if not opt.escape_radius > 0:
        parser.error("--escape-radius must be positive.")
    if opt.workers <= 0:
        parser.error("--workers must be positive.")

    try:
        constant = select_constant(opt.constant_index)
    except IndexError as exc:
        parser.error(str(exc))

    return RenderParameters(
        width=opt.width,
        height=opt.height,
        constant=constant,
        max_iterations=opt.max_iterations,
        escape_radius=opt.escape_radius,
    )


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)
    configure_tf_logging(VERBOSE)

    log("TensorFlow version: %s" % tf.__version__)

    params = resolve_parameters(opt, parser)
    device = select_device()

    log("Rendering {0}x{1} with c = {2}".format(params.width, params.height, params.constant))
    result = render_frame(params, device=device, workers=opt.workers)

    blue_path, gray_path = write_render(result, Path(opt.output_dir), normalize_format(opt.format))
    print(blue_path)
    print(gray_path)


if __name__ == '__main__':
    main()
