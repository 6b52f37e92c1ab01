#!/usr/bin/env python

import random
import timeit

from decaymetrics.metrics.stats.expdec_sample import standard_sample
from decaymetrics.metrics.timer import Timer

gen = random.Random(1)
l100000 = [gen.lognormvariate(0, 1) for _ in range(100000)]

sample = standard_sample(now=0, seed=1)
timer = Timer("bench", now=0, seed=1)


def fill_sample(sample):
    # Spread updates over two hours so the run crosses a rescale
    for i, value in enumerate(l100000):
        sample.update(value, now=i * 0.072)


def fill_timer(timer):
    for i, value in enumerate(l100000):
        timer.update(value, now=i * 0.072)
    timer.metrics(now=len(l100000) * 0.072)


# Warmup
print("Warmup")
fill_sample(sample)

print("Test")
for name in ("fill_sample(sample)", "fill_timer(timer)"):
    trun = timeit.timeit(name,
                         'from __main__ import fill_sample, fill_timer, sample, timer',
                         number=10)
    print("Result:", name, trun)
