# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

from setuptools import setup
from setuptools import find_packages

from adfs_auth.metadata import __desc__, __version__

PACKAGE = 'adfs_auth'
DIR = os.path.dirname(os.path.realpath(__file__))


setup(
    name=PACKAGE,
    version=__version__,
    description=__desc__,
    long_description=open('%s/README.md' % DIR).read(),
    long_description_content_type='text/markdown',
    license='Apache License, Version 2.0',
    keywords='adfs saml aws sts',
    packages=find_packages(exclude=['*.test']),
    python_requires='>=3.7',
    extras_require={
        'test': open('%s/requirements.test.txt' % DIR).readlines(),
    },
    install_requires=open('%s/requirements.txt' % DIR).readlines(),
    entry_points={
        'console_scripts': [
            'adfs_auth = adfs_auth.main:entry_point'
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Topic :: Software Development',
        'License :: OSI Approved :: Apache Software License',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX',
        'Natural Language :: English',
    ]
)
