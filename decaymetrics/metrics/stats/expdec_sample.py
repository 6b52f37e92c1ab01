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

import heapq
import logging
import math
import random
import time

from decaymetrics.metrics.stats.snapshot import Snapshot


log = logging.getLogger(__name__)


class ExpDecSample(object):
    """\
    An exponentially-decaying random sample of floats. Uses Cormode et
    al's forward-decaying priority reservoir to keep a statistically
    representative sample, exponentially biased towards newer entries:

      http://dimacs.rutgers.edu/~graham/pubs/papers/fwddecay.pdf

    Every value is stored under the priority ``w(t - L) / u`` where ``L``
    is the landmark (``start_time``), ``w(x) = exp(alpha * x)`` and ``u``
    is a uniform draw from the sample's own generator. Once more than
    ``reservoir_size`` values have been seen, a new value only stays if
    its priority beats the lowest one, which is then evicted.

    Timestamps are in seconds and truncated to whole seconds. Passing
    ``now=None`` uses the wall clock. Instances are not thread safe.
    """

    RESCALE_THRESHOLD = 60 * 60

    def __init__(self, reservoir_size, alpha, now=None, seed=None,
                 rescale_threshold=None):
        self.rsize = reservoir_size
        self.alpha = alpha
        if rescale_threshold is None:
            rescale_threshold = self.RESCALE_THRESHOLD
        self.rescale_threshold = rescale_threshold
        self.random = random.Random(seed)
        self.clear(now)

    def clear(self, now=None):
        # priority -> value, with `priorities` as a min-heap over the same keys
        self.values = {}
        self.priorities = []
        self.count = 0
        self.start_time = self.tick(now)
        self.next_rescale = self.start_time + self.rescale_threshold

    def size(self):
        return min(self.rsize, self.count)

    def update(self, val, now=None):
        seconds = self.tick(now)
        if seconds >= self.next_rescale:
            self.rescale(seconds)
        priority = self.weight(seconds - self.start_time) / self.draw()
        self.count += 1
        if self.count <= self.rsize:
            self._insert(priority, val)
        elif self.priorities and priority > self.priorities[0]:
            self._insert(priority, val)
            del self.values[heapq.heappop(self.priorities)]

    def rescale(self, now):
        """\
        Move the landmark to `now`. Keys computed against the old landmark
        L are multiplied by exp(-alpha * (now - L)), which is the same as
        having computed them against `now` in the first place, so relative
        order and retention odds are unchanged while the weights stay small.

        Keys that become equal after scaling (e.g. after underflowing to
        zero over a long idle period) merge, the one scaled from the
        largest original key wins.
        """
        now = self.tick(now)
        factor = math.exp(-self.alpha * (now - self.start_time))
        rescaled = {}
        for k in sorted(self.values):
            rescaled[k * factor] = self.values[k]
        log.debug("Rescaling sample from %s to %s: %d -> %d values",
                  self.start_time, now, len(self.values), len(rescaled))
        self.values = rescaled
        self.priorities = sorted(rescaled)
        self.start_time = now
        self.count = len(rescaled)
        self.next_rescale = max(now + self.rescale_threshold, self.next_rescale)

    def snapshot(self):
        return Snapshot(self.get_values())

    def get_values(self):
        return [self.values[k] for k in sorted(self.values)]

    def get_state(self):
        return self.random.getstate()

    def set_state(self, state):
        self.random.setstate(state)

    def tick(self, now=None):
        if now is None:
            now = time.time()
        return int(math.floor(now))

    def weight(self, t):
        return math.exp(self.alpha * t)

    def draw(self):
        # random() is in [0, 1), flip it so the divisor is never zero
        return 1.0 - self.random.random()

    def _insert(self, priority, val):
        if priority not in self.values:
            heapq.heappush(self.priorities, priority)
        self.values[priority] = val


def standard_sample(now=None, seed=None):
    """\
    1028 samples with an alpha of 0.015: a 99.9% confidence level with a
    5% margin of error assuming a normal distribution, heavily biased
    towards the last five minutes of measurements.
    """
    return ExpDecSample(1028, 0.015, now=now, seed=seed)
