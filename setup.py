from setuptools import setup, find_namespace_packages

package_name = 'termball_sim2d'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_namespace_packages(include=[package_name, package_name + '.*']),
    python_requires='>=3.10',
    install_requires=[
        'setuptools',
        'numpy',
        'pygame>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='shluf',
    maintainer_email='luthfisalis09@gmail.com',
    description='Simulasi bola memantul 2D di terminal dengan sub-cell rendering',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'termball = termball_sim2d.simulation:main',
        ],
    },
)
