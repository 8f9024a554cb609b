from setuptools import setup, find_packages

package_name = 'operating_trajectories'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.9',
    install_requires=['numpy', 'scipy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    description='Operating-trajectory providers for seeding SLQ-type trajectory optimization',
    license='MIT',
)
