from setuptools import setup, find_packages

setup(
    name="art-showcase",
    version="0.1",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'sqlalchemy>=2.0',
        'pydantic>=2.0',
        'pydantic-settings',
        'fastapi',
        'uvicorn',
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',
        ],
    },
)
