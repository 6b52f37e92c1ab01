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

import os
from setuptools import setup
from decaymetrics import __version__

here = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(here, "requirements.txt")) as f:
    install_requires = [e.strip() for e in f if e.strip() and not e.startswith("#")]

setup(
    name='decaymetrics',
    version=__version__,

    description='Forward-decaying reservoir sampling for runtime metrics',
    long_description=open(os.path.join(here, 'README.rst')).read(),
    license='ASF2.0',
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        "Programming Language :: Python :: 3",
        'Topic :: System :: Monitoring',
        'Topic :: Utilities',
    ],
    zip_safe=False,
    packages=['decaymetrics', 'decaymetrics.metrics', 'decaymetrics.metrics.stats'],
    include_package_data=True,

    entry_points="""\
    [console_scripts]
    decaymetrics=decaymetrics.main:main
    """
)
