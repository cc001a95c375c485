from setuptools import setup, find_packages

setup(
    name="person-validation",
    version="0.1.0",
    description="Field-level validation for a person data entry form",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'person_validation': ['local-config.yaml', 'person.schema.json'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
        'requests>=2.28.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)
