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

import t

from decaymetrics.metrics.histogram import Histogram
from decaymetrics.metrics.stats.expdec_sample import ExpDecSample
from decaymetrics.metrics.stats.usample import UniformSample


def test_empty_histogram():
    histo = Histogram("h", now=0, seed=1)
    t.eq(histo.count, 0)
    t.eq(histo.size(), 0)
    t.eq(histo.min(), 0.0)
    t.eq(histo.max(), 0.0)
    t.eq(histo.mean(), 0.0)
    t.eq(histo.stddev(), 0.0)
    t.eq(histo.snapshot().median(), 0.0)
    ret = histo.metrics(now=5)
    t.eq([mv.name for mv in ret], ["h.count", "h.sum", "h.min", "h.max"])
    t.eq(ret[2].value, None)


def test_histogram_with_1000_elements():
    histo = Histogram("h", now=0, seed=1)
    for i in range(1, 1001):
        histo.update(i, now=1)
    t.eq(histo.count, 1000)
    t.eq(histo.size(), 1000)
    t.eq(histo.sum, 500500)
    t.eq(histo.min(), 1)
    t.eq(histo.max(), 1000)
    t.approx(histo.mean(), 500.5)
    t.approx(histo.variance(), 1000 * 1001 / 12.0, places=4)
    t.approx(histo.stddev(), math.sqrt(1000 * 1001 / 12.0), places=5)
    snapshot = histo.snapshot()
    t.approx(snapshot.median(), 500.5)
    t.approx(snapshot.p75(), 750.75)
    t.approx(snapshot.p99(), 990.99)


def test_variance_with_negative_values():
    histo = Histogram("h", now=0, seed=1)
    for v in (-2, 0, 5):
        histo.update(v, now=0)
    t.approx(histo.mean(), 1.0)
    t.approx(histo.variance(), 13.0)
    t.eq(histo.min(), -2)


@t.set_cfg("reservoir_size", 50)
def test_histogram_is_bounded_by_reservoir():
    histo = Histogram("h", now=0, seed=1)
    for i in range(500):
        histo.update(i, now=i)
    t.eq(histo.count, 500)
    t.eq(histo.size(), 50)
    t.eq(histo.snapshot().size(), 50)


def test_biased_and_uniform():
    t.istype(Histogram("h", now=0).sample, ExpDecSample)
    t.istype(Histogram("h", biased=False).sample, UniformSample)


def test_custom_sample():
    histo = Histogram("h", sample=ExpDecSample(2, 0, now=0, seed=1))
    for i in range(5):
        histo.update(i, now=0)
    t.eq(histo.count, 5)
    t.eq(histo.size(), 2)


def test_clear():
    histo = Histogram("h", now=0, seed=1)
    for i in range(10):
        histo.update(i, now=i)
    histo.clear(now=100)
    t.eq(histo.count, 0)
    t.eq(histo.sum, 0)
    t.eq(histo.size(), 0)
    t.eq(histo.minv, None)
    t.eq(histo.sample.start_time, 100)
    histo.update(4, now=101)
    t.eq(histo.min(), 4)
    t.eq(histo.variance(), 0.0)


def test_metrics():
    histo = Histogram("h", percentiles=(50, 99.9), now=0, seed=1)
    for i in range(1, 11):
        histo.update(i, now=0)
    ret = histo.metrics(now=3)
    t.eq([mv.name for mv in ret], [
        "h.count", "h.sum", "h.min", "h.max", "h.mean", "h.stddev",
        "h.perc_50", "h.perc_99_9",
    ])
    values = dict((mv.name, mv.value) for mv in ret)
    t.eq(values["h.count"], 10)
    t.eq(values["h.sum"], 55)
    t.approx(values["h.perc_50"], 5.5)
    t.eq(values["h.perc_99_9"], 10)
    t.eq(ret[0].time, 3)


def test_default_percentiles():
    histo = Histogram("h")
    t.eq([d for _, d in histo.percentiles], [
        "perc_75", "perc_95", "perc_98", "perc_99", "perc_99_9",
    ])
