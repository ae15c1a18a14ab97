from glob import glob
from setuptools import setup


setup(
    name='infixrpn',
    version='0.1.0',
    description='Infix and RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit>=3.0.29',
    ],
    packages=['infixrpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
