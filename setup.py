from setuptools import setup, find_packages

import gen_aws_sso_config

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

with open('requirements_dev.txt') as f:
    test_requirements = [line for line in f.read().splitlines() if line and not line.startswith('-r')]

setup(
    name='gen-aws-sso-config',
    version=gen_aws_sso_config.version,
    install_requires=requirements,
    extras_require={'test': test_requirements},
    description="A CLI to generate ~/.aws/config profiles from IAM Identity Center entitlements",
    long_description=open("LONG_DESCRIPTION.md").read(),
    long_description_content_type='text/markdown',
    python_requires=">=3.7",
    license='Apache License, v2.0',
    packages=find_packages(exclude=('tests', 'docs')),
    test_suite="tests",
    scripts=['bin/gen-aws-sso-config'],
    classifiers=[
        'Natural Language :: English',
        'Programming Language :: Python :: 3 :: Only',
        'License :: OSI Approved :: Apache Software License'
    ]
)
