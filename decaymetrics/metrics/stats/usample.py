import random

from decaymetrics.metrics.stats.snapshot import Snapshot


class UniformSample(object):
    """\
    A random sample of a stream of floats using Vitter's Algorithm R,
    based on the implementation in Coda Hale's Metrics library:

        https://github.com/codahale/metrics/blob/development/metrics-core/src/main/java/com/yammer/metrics/stats/UniformSample.java

    Timestamps are accepted so it can stand in for an ExpDecSample, but
    the sample does not depend on them.
    """

    def __init__(self, size, now=None, seed=None):
        self.random = random.Random(seed)
        self.count = 0
        self.values = [0.0] * size

    def clear(self, now=None):
        self.count = 0
        for i in range(len(self.values)):
            self.values[i] = 0.0

    def size(self):
        if self.count > len(self.values):
            return len(self.values)
        return self.count

    def update(self, val, now=None):
        self.count += 1
        if self.count <= len(self.values):
            self.values[self.count - 1] = val
        else:
            r = self.random.randint(0, self.count - 1)
            if r < len(self.values):
                self.values[r] = val

    def snapshot(self):
        return Snapshot(self.get_values())

    def get_values(self):
        return self.values[:self.size()]
