import math


class EWMA(object):
    """\
    Exponentially-weighted moving average. Based on the
    implementation in Coda Hale's metrics library:

       https://github.com/codahale/metrics/blob/development/metrics-core/src/main/java/com/yammer/metrics/stats/EWMA.java

    `tick` has to be called every `interval` seconds, `rate` is in
    events per second.
    """

    INTERVAL = 5.0

    @staticmethod
    def alpha_for(minutes, interval=INTERVAL):
        return 1 - math.exp(-interval / 60.0 / minutes)

    @staticmethod
    def one_minute(interval=INTERVAL):
        return EWMA(EWMA.alpha_for(1, interval), interval)

    @staticmethod
    def five_minute(interval=INTERVAL):
        return EWMA(EWMA.alpha_for(5, interval), interval)

    @staticmethod
    def fifteen_minute(interval=INTERVAL):
        return EWMA(EWMA.alpha_for(15, interval), interval)

    def __init__(self, alpha, interval=INTERVAL):
        self.alpha = alpha
        self.interval = interval
        self.clear()

    def clear(self):
        self.initialized = False
        self.curr_rate = 0.0
        self.uncounted = 0

    def update(self, val):
        self.uncounted += val

    def rate(self):
        return self.curr_rate

    def tick(self):
        count = self.uncounted
        self.uncounted = 0
        instant_rate = count / self.interval
        if self.initialized:
            self.curr_rate += (self.alpha * (instant_rate - self.curr_rate))
        else:
            self.curr_rate = instant_rate
            self.initialized = True
