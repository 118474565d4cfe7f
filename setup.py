from setuptools import find_packages, setup

package_name = 'cargo_fleet'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'pyyaml',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='Cargo assignment and route feasibility checks for a vehicle fleet',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'cargo_fleet = cargo_fleet.presentation.main:main',
        ],
    },
)
