from setuptools import setup, find_packages
import os

def get_requirements():
    thelibFolder = os.path.dirname(os.path.realpath(__file__))
    requirementPath = thelibFolder + '/requirements.txt'
    if os.path.isfile(requirementPath):
        with open(requirementPath) as f:
            return [line for line in f.read().splitlines() if line and not line.startswith('#')]
    return []

setup(
    name='servicecatalog-schema',
    version='0.1.0',
    description='JSON schema generator for the Kubernetes Service Catalog API types',
    license='Apache-2.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.10',
    install_requires=get_requirements(),
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Topic :: Software Development :: Code Generators',
    ],
    entry_points={
        'console_scripts': [
            'servicecatalog-generate-schema=servicecatalog_schema.generate:main',
        ]
    },
)
