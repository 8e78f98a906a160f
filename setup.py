from setuptools import setup

setup(
    name='bitpacket-py',
    version='0.0.1',
    url='',
    license='AGPL-3.0-only',

    description='Decoder and evaluator for hex encoded bit-packed packets',
    long_description='',

    packages=['bitpacket'],

    python_requires='>3.10',

    extras_require={
        'dev': [
            'mypy>=0.991',
            'flake8>=5.0.4',
            'pytest>=7.2.0'
        ]
    },

    entry_points={
        'console_scripts': [
            'bitpacket-py = bitpacket.__main__:main'
        ]
    }
)
