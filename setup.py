from setuptools import find_packages, setup

setup(
    name='pystaggered',
    version='0.1.0',
    packages=find_packages(exclude=['examples', 'examples.*']),
    install_requires=[
        'numpy',
        'scipy>=1.9',
        'matplotlib',
        'cached-property',
    ],
    extras_require={
        'test': ['pytest'],
    },
    license='LGPL',
    platforms='any',
    zip_safe=False,
)
