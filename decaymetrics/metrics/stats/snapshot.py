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


class Snapshot(object):
    """\
    A statistical snapshot of a set of sampled values. Percentiles use
    the same (n + 1) interpolation as Coda Hale's metrics library:

      https://github.com/codahale/metrics/blob/development/metrics-core/src/main/java/com/yammer/metrics/stats/Snapshot.java
    """

    MEDIAN_Q = 0.5
    P75_Q = 0.75
    P95_Q = 0.95
    P98_Q = 0.98
    P99_Q = 0.99
    P999_Q = 0.999

    def __init__(self, values):
        self.values = sorted(values)

    def size(self):
        return len(self.values)

    def get_values(self):
        return self.values[:]

    def quantile(self, q):
        """\
        Value at quantile `q` in [0, 1]. An empty snapshot yields 0.0.
        """
        if not 0.0 <= q <= 1.0:
            raise ValueError("%r is not in [0..1]" % (q,))
        if not self.values:
            return 0.0
        pos = q * (len(self.values) + 1)
        if pos < 1:
            return self.values[0]
        if pos >= len(self.values):
            return self.values[-1]
        lower = self.values[int(pos) - 1]
        upper = self.values[int(pos)]
        return lower + (pos - math.floor(pos)) * (upper - lower)

    def median(self):
        return self.quantile(self.MEDIAN_Q)

    def p75(self):
        return self.quantile(self.P75_Q)

    def p95(self):
        return self.quantile(self.P95_Q)

    def p98(self):
        return self.quantile(self.P98_Q)

    def p99(self):
        return self.quantile(self.P99_Q)

    def p999(self):
        return self.quantile(self.P999_Q)

    def min(self):
        if not self.values:
            return 0.0
        return self.values[0]

    def max(self):
        if not self.values:
            return 0.0
        return self.values[-1]

    def mean(self):
        if not self.values:
            return 0.0
        return float(sum(self.values)) / len(self.values)

    def stddev(self):
        if len(self.values) <= 1:
            return 0.0
        mean = self.mean()
        total = sum((v - mean) ** 2 for v in self.values)
        return math.sqrt(total / (len(self.values) - 1.0))
