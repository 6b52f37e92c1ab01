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

import decaymetrics.cfg as cfg
from decaymetrics.metrics.metric import Metric, MetricValue as MV
from decaymetrics.metrics.stats.ewma import EWMA


class Meter(Metric):
    """\
    Counts events and tracks their 1, 5 and 15 minute moving average
    rates. The averages are ticked lazily: every mark or rate read first
    catches up on the ticks that elapsed since the last one.
    """

    def __init__(self, name, now=None, tick_interval=None):
        self.name = name
        if tick_interval is None:
            tick_interval = cfg.meter_tick_interval
        self.tick_interval = tick_interval
        self.m1_rate = EWMA.one_minute(tick_interval)
        self.m5_rate = EWMA.five_minute(tick_interval)
        self.m15_rate = EWMA.fifteen_minute(tick_interval)
        self.clear(now)

    def clear(self, now=None):
        if now is None:
            now = time.time()
        self.count = 0
        self.start_time = now
        self.last_tick = now
        for r in (self.m1_rate, self.m5_rate, self.m15_rate):
            r.clear()

    def tick_if_necessary(self, now=None):
        if now is None:
            now = time.time()
        age = now - self.last_tick
        if age <= self.tick_interval:
            return
        self.last_tick = now - (age % self.tick_interval)
        for _ in range(int(age // self.tick_interval)):
            for r in (self.m1_rate, self.m5_rate, self.m15_rate):
                r.tick()

    def mark(self, value=1, now=None):
        self.tick_if_necessary(now)
        self.count += value
        self.m1_rate.update(value)
        self.m5_rate.update(value)
        self.m15_rate.update(value)

    def update(self, value=1, now=None):
        self.mark(value, now)

    def one_minute_rate(self, now=None):
        self.tick_if_necessary(now)
        return self.m1_rate.rate()

    def five_minute_rate(self, now=None):
        self.tick_if_necessary(now)
        return self.m5_rate.rate()

    def fifteen_minute_rate(self, now=None):
        self.tick_if_necessary(now)
        return self.m15_rate.rate()

    def mean_rate(self, now=None):
        if now is None:
            now = time.time()
        elapsed = now - self.start_time
        if self.count == 0 or elapsed <= 0:
            return 0.0
        return float(self.count) / elapsed

    def metrics(self, now=None):
        if now is None:
            now = time.time()
        self.tick_if_necessary(now)
        ret = []
        ret.append(MV("%s.count" % self.name, self.count, now))
        ret.append(MV("%s.rate_avg" % self.name, self.mean_rate(now), now))
        ret.append(MV("%s.rate_1m" % self.name, self.m1_rate.rate(), now))
        ret.append(MV("%s.rate_5m" % self.name, self.m5_rate.rate(), now))
        ret.append(MV("%s.rate_15m" % self.name, self.m15_rate.rate(), now))
        return ret
