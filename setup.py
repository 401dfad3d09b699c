from pathlib import Path
import site
import sys

import setuptools


# workaround for https://github.com/pypa/pip/issues/7953
site.ENABLE_USER_SITE = '--user' in sys.argv[1:]

setuptools.setup(name='cyrtrans',
                 description='Cyrillic to Latin transliteration according to '
                             'published schemas (ICAO, BGN/PCGN, GOST, ...)',
                 long_description=Path('README.md').read_text(encoding='utf-8'),  # noqa: E501
                 long_description_content_type='text/markdown',
                 package_dir={'': 'src'},
                 packages=setuptools.find_packages(where='src'),
                 package_data={'cyrtrans': ['resources/*.json']},
                 python_requires='>=3.9',
                 setup_requires=['setuptools_scm'],
                 use_scm_version={'write_to': 'src/cyrtrans/version.py',
                                  'fallback_version': '0.1.0'},
                 extras_require={'test': ['pytest']},
                 entry_points={'console_scripts':
                               ['cyrtrans = cyrtrans.__main__:main']},
                 classifiers=['Programming Language :: Python :: 3',
                              'Natural Language :: Russian',
                              'Topic :: Text Processing :: Linguistic'],
                 )
