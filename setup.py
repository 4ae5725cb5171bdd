from setuptools import setup

with open('requirements.txt') as f:
    requirements = [l.strip() for l in f if l.strip()]

setup(
    name='snailfish',
    version='0.1',
    packages=['snailfish'],
    description='Parser for nested-pair snailfish numbers',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
)
