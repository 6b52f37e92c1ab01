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

import time

from decaymetrics.metrics.histogram import Histogram
from decaymetrics.metrics.meter import Meter
from decaymetrics.metrics.metric import Metric


class Timer(Metric):
    """\
    A meter for the call rate combined with a histogram of the call
    durations.
    """

    def __init__(self, name, now=None, seed=None, biased=True):
        self.name = name
        self.meter = Meter("%s.calls" % name, now=now)
        self.histogram = Histogram("%s.histo" % name, biased=biased,
                                   now=now, seed=seed)

    def clear(self, now=None):
        self.meter.clear(now)
        self.histogram.clear(now)

    def update(self, value, now=None):
        self.meter.mark(1, now)
        self.histogram.update(value, now)

    def tick_if_necessary(self, now=None):
        self.meter.tick_if_necessary(now)

    def snapshot(self):
        return self.histogram.snapshot()

    def one_minute_rate(self, now=None):
        return self.meter.one_minute_rate(now)

    def five_minute_rate(self, now=None):
        return self.meter.five_minute_rate(now)

    def fifteen_minute_rate(self, now=None):
        return self.meter.fifteen_minute_rate(now)

    def mean_rate(self, now=None):
        return self.meter.mean_rate(now)

    def count(self):
        return self.histogram.count

    def mean(self):
        return self.histogram.mean()

    def stddev(self):
        return self.histogram.stddev()

    def variance(self):
        return self.histogram.variance()

    def min(self):
        return self.histogram.min()

    def max(self):
        return self.histogram.max()

    def metrics(self, now=None):
        if now is None:
            now = time.time()
        return self.meter.metrics(now) + self.histogram.metrics(now)
