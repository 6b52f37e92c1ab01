debug = False
log_level = "INFO"
full_trace = False

# 1028 samples give a 99.9% confidence level with a 5% margin of error
# assuming a normal distribution. An alpha of 0.015 biases the reservoir
# heavily towards the last five minutes of measurements.
reservoir_size = 1028
reservoir_alpha = 0.015
rescale_threshold = 60 * 60  # seconds

biased = True
seed = None  # None seeds every reservoir from the OS
histogram_percentiles = [75, 95, 98, 99, 99.9]

meter_tick_interval = 5.0  # seconds

metric_name = "timer"
report_interval = 60.0  # seconds of sample time between reports
input_file = None  # None reads samples from stdin
strict = False  # raise on unparseable input lines instead of skipping them
