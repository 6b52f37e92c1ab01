# -*- coding: utf-8 -
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
#
# Copyright 2011 Cloudant, Inc.

import sys
import math
import time
import logging
import optparse as op

import decaymetrics
import decaymetrics.cfg as cfg
from decaymetrics.errors import MetricsError, ConfigError, ParseError
from decaymetrics.metrics.timer import Timer


log = logging.getLogger(__name__)
levels = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
}

__usage__ = "%prog [OPTIONS] [CONFIG_FILE]"
__version__ = "decaymetrics %s" % decaymetrics.__version__


def options():
    return [
        op.make_option(
            "--debug", dest="debug", default=False,
            action="store_true",
            help="Enable debug logging. [%default]"
        ),
        op.make_option(
            "--input", dest="input_file", metavar="FILE",
            default=cfg.input_file,
            help="Read samples from FILE instead of stdin"
        ),
        op.make_option(
            "--metric-name", dest="metric_name", metavar="NAME",
            default=cfg.metric_name,
            help="Name prefix of the reported metrics [%default]"
        ),
        op.make_option(
            "--report-interval", dest="report_interval", metavar="SECONDS",
            type="float", default=cfg.report_interval,
            help="Seconds of sample time between reports [%default]"
        ),
        op.make_option(
            "--reservoir-size", dest="reservoir_size", metavar="INT",
            type="int", default=cfg.reservoir_size,
            help="Maximum number of retained samples [%default]"
        ),
        op.make_option(
            "--reservoir-alpha", dest="reservoir_alpha", metavar="FLOAT",
            type="float", default=cfg.reservoir_alpha,
            help="Decay factor of the reservoir [%default]"
        ),
        op.make_option(
            "--seed", dest="seed", metavar="INT",
            type="int", default=cfg.seed,
            help="Seed the reservoir for reproducible output"
        ),
        op.make_option(
            "--uniform", dest="biased",
            default=cfg.biased, action="store_false",
            help="Use a uniform instead of an exponentially decaying sample"
        ),
        op.make_option(
            "--strict", dest="strict",
            default=cfg.strict, action="store_true",
            help="Fail on unparseable input lines instead of skipping them"
        ),
        op.make_option(
            "--full-trace", dest="full_trace",
            default=cfg.full_trace, action="store_true",
            help="Display full error if config file fails to load"
        ),
        op.make_option(
            "--log-level", dest="log_level",
            metavar="NAME", default="INFO",
            help="Logging output verbosity [%default]"
        ),
    ]


def main():
    parser = op.OptionParser(
        usage=__usage__,
        version=__version__,
        option_list=options()
    )
    opts, args = parser.parse_args()

    # Logging have to be configured before load_config,
    # where it can (and should) be already used
    logfmt = "[%(asctime)-15s][%(levelname)s] %(module)s - %(message)s"
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logfmt))
    handler.setLevel(logging.ERROR)  # Overridden by configuration
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)

    if args:
        try:
            cfgfile, = args
        except ValueError:
            parser.error("Too many arguments.")
    else:
        cfgfile = None
    load_config(cfgfile, full_trace=opts.full_trace)

    # Mandatory second commandline
    # processing pass to override values in cfg
    parser.parse_args(values=cfg)

    if cfg.debug:
        cfg.log_level = logging.DEBUG

    lvl = levels.get(str(cfg.log_level).upper(), cfg.log_level)
    handler.setLevel(lvl)

    try:
        if cfg.input_file is None:
            Replay(cfg, sys.stdin, sys.stdout).run()
        else:
            with open(cfg.input_file) as stream:
                Replay(cfg, stream, sys.stdout).run()
    except (MetricsError, IOError) as exc:
        log.error("%s", exc)
        sys.exit(1)


def parse_line(line, now=None):
    """\
    Parse a ``value [timestamp]`` sample line. Returns None for blank and
    comment lines, otherwise a ``(value, timestamp)`` tuple.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    fields = line.split()
    if len(fields) > 2:
        raise ParseError("Expected 'value [timestamp]', got %r" % line)
    try:
        value = float(fields[0])
        if len(fields) == 2:
            when = float(fields[1])
        else:
            when = time.time() if now is None else now
    except ValueError:
        raise ParseError("Invalid number in %r" % line)
    if math.isnan(value) or math.isinf(value) or math.isinf(when) or math.isnan(when):
        raise ParseError("Non-finite number in %r" % line)
    return value, when


class Replay(object):
    """\
    Feeds sample lines through a Timer and writes its metrics to `out`
    every `report_interval` seconds of sample time, and once more at the
    end of the input. A report at time t covers the samples stamped at or
    before t.
    """

    def __init__(self, cfg, stream, out):
        if not cfg.report_interval or cfg.report_interval <= 0:
            raise ConfigError("report_interval must be positive, not %r"
                              % (cfg.report_interval,))
        # math.exp overflows past 709; elapsed never exceeds rescale_threshold
        if cfg.biased and cfg.reservoir_alpha * cfg.rescale_threshold >= 709:
            raise ConfigError("reservoir_alpha %r overflows within a %ss rescale"
                              " interval" % (cfg.reservoir_alpha,
                                             cfg.rescale_threshold))
        self.cfg = cfg
        self.stream = stream
        self.out = out
        self.timer = None
        self.next_report = None
        self.last_time = None

    def run(self):
        nsamples = 0
        for lineno, line in enumerate(self.stream, 1):
            try:
                sample = parse_line(line)
            except ParseError as exc:
                if self.cfg.strict:
                    raise ParseError("Line %d: %s" % (lineno, exc))
                log.warning("Skipping line %d: %s", lineno, exc)
                continue
            if sample is None:
                continue
            self.process(*sample)
            nsamples += 1
        if self.timer is not None:
            self.report(self.last_time)
        log.info("Replayed %d samples", nsamples)
        return nsamples

    def process(self, value, when):
        if self.timer is None:
            self.timer = Timer(self.cfg.metric_name, now=when,
                               seed=self.cfg.seed, biased=self.cfg.biased)
            self.next_report = when + self.cfg.report_interval
        if when > self.next_report:
            self.report(self.next_report)
            while self.next_report < when:
                self.next_report += self.cfg.report_interval
        self.timer.update(value, when)
        self.last_time = when

    def report(self, now):
        for mv in self.timer.metrics(now):
            self.out.write("%s %s %d\n" % (mv.name, mv.value, mv.time))
        self.out.flush()


def load_config(cfgfile, full_trace=False):
    cfg_mapping = vars(cfg)
    try:
        if cfgfile is not None:
            with open(cfgfile, 'rb') as file:
                exec(compile(file.read(), cfgfile, 'exec'), cfg_mapping)
    except Exception as e:
        log.error("Failed to read config file: %s", cfgfile)
        if full_trace:
            log.exception("Reason: %s", e)
        else:
            log.error("Reason: %s", e)
        sys.exit(1)
    for name in dir(cfg):
        if name.startswith("_"):
            continue
        if name in cfg_mapping:
            setattr(cfg, name, cfg_mapping[name])


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
