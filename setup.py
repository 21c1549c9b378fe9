from glob import glob
from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
]


setup(
    name='deskcalc',
    version='0.1.0',
    description='Interactive RPN desk calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['deskcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',
    tests_require=TESTS_REQUIRE,
    extras_require={
        'test': TESTS_REQUIRE,
    },
    scripts=glob('bin/*'),
    license='ISC',
)
