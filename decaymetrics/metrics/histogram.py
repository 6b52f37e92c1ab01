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

import math

import decaymetrics.cfg as cfg
from decaymetrics.metrics.metric import Metric, MetricValue as MV
from decaymetrics.metrics.stats.expdec_sample import ExpDecSample
from decaymetrics.metrics.stats.usample import UniformSample


class Histogram(Metric):
    def __init__(self, name, biased=True, percentiles=None, sample=None,
                 now=None, seed=None):
        self.name = name
        if sample is not None:
            self.sample = sample
        elif biased:
            self.sample = ExpDecSample(cfg.reservoir_size, cfg.reservoir_alpha,
                                       now=now, seed=seed,
                                       rescale_threshold=cfg.rescale_threshold)
        else:
            self.sample = UniformSample(cfg.reservoir_size, now=now, seed=seed)
        if percentiles is None:
            percentiles = cfg.histogram_percentiles
        self.percentiles = self._fmt(percentiles)
        self._reset()

    def _reset(self):
        self.count = 0
        self.sum = 0
        self.minv = None
        self.maxv = None
        self.variance_info = (0.0, 0.0)

    def clear(self, now=None):
        self.sample.clear(now)
        self._reset()

    def update(self, value, now=None):
        self.count += 1
        self.sum += value
        self.sample.update(value, now)
        if self.minv is None or value < self.minv:
            self.minv = value
        if self.maxv is None or value > self.maxv:
            self.maxv = value
        self._update_variance(value)

    def size(self):
        return self.sample.size()

    def snapshot(self):
        return self.sample.snapshot()

    def min(self):
        return 0.0 if self.minv is None else self.minv

    def max(self):
        return 0.0 if self.maxv is None else self.maxv

    def mean(self):
        if self.count == 0:
            return 0.0
        return float(self.sum) / self.count

    def variance(self):
        if self.count <= 1:
            return 0.0
        return self.variance_info[1] / (float(self.count) - 1.0)

    def stddev(self):
        return math.sqrt(self.variance())

    def metrics(self, now=None):
        ret = []
        ret.append(MV("%s.count" % self.name, self.count, now))
        ret.append(MV("%s.sum" % self.name, self.sum, now))
        ret.append(MV("%s.min" % self.name, self.minv, now))
        ret.append(MV("%s.max" % self.name, self.maxv, now))
        if self.count > 0:
            ret.append(MV("%s.mean" % self.name, self.mean(), now))
            ret.append(MV("%s.stddev" % self.name, self.stddev(), now))
            for disp, val in self._percentiles():
                name = "%s.%s" % (self.name, disp)
                ret.append(MV(name, val, now))
        return ret

    def _update_variance(self, value):
        oldm, olds = self.variance_info
        if self.count == 1:
            self.variance_info = (value, 0.0)
            return
        newm = oldm + ((value - oldm) / self.count)
        news = olds + ((value - oldm) * (value - newm))
        self.variance_info = (newm, news)

    def _percentiles(self):
        snapshot = self.snapshot()
        return [(d, snapshot.quantile(p / 100.0)) for (p, d) in self.percentiles]

    def _fmt(self, percentiles):
        ret = []
        for p in percentiles:
            d = "%0.1f" % p
            if d.endswith(".0"):
                d = d[:-2]
            d = "perc_%s" % d.replace(".", "_")
            ret.append((p, d))
        return ret
