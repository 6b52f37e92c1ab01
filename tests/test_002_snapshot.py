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

from decaymetrics.metrics.stats.snapshot import Snapshot


def test_empty_snapshot():
    snapshot = Snapshot([])
    t.eq(snapshot.size(), 0)
    t.eq(snapshot.median(), 0.0)
    t.eq(snapshot.p999(), 0.0)
    t.eq(snapshot.min(), 0.0)
    t.eq(snapshot.max(), 0.0)
    t.eq(snapshot.mean(), 0.0)
    t.eq(snapshot.stddev(), 0.0)


def test_values_are_sorted_copies():
    values = [5, 1, 4, 2, 3]
    snapshot = Snapshot(values)
    t.eq(snapshot.get_values(), [1, 2, 3, 4, 5])
    t.eq(values, [5, 1, 4, 2, 3])
    snapshot.get_values().append(6)
    t.eq(snapshot.size(), 5)


def test_quantiles():
    snapshot = Snapshot([5, 1, 4, 2, 3])
    t.eq(snapshot.quantile(0.0), 1)
    t.eq(snapshot.quantile(1.0), 5)
    t.approx(snapshot.median(), 3.0)
    t.approx(snapshot.p75(), 4.5)
    t.eq(snapshot.p95(), 5)
    t.eq(snapshot.p99(), 5)
    t.approx(snapshot.quantile(0.25), 1.5)


def test_quantiles_of_1000():
    snapshot = Snapshot(range(1, 1001))
    t.approx(snapshot.median(), 500.5)
    t.approx(snapshot.p75(), 750.75)
    t.approx(snapshot.p95(), 950.95)
    t.approx(snapshot.p98(), 980.98)
    t.approx(snapshot.p99(), 990.99)
    t.approx(snapshot.p999(), 999.999)


def test_quantile_out_of_range():
    snapshot = Snapshot([1, 2, 3])
    t.raises(ValueError, snapshot.quantile, -0.1)
    t.raises(ValueError, snapshot.quantile, 1.1)
    t.raises(ValueError, snapshot.quantile, float("nan"))


def test_dispersion():
    snapshot = Snapshot([1, 2, 3, 4, 5])
    t.eq(snapshot.min(), 1)
    t.eq(snapshot.max(), 5)
    t.approx(snapshot.mean(), 3.0)
    t.approx(snapshot.stddev(), math.sqrt(2.5))
    t.eq(Snapshot([7]).stddev(), 0.0)
