# setup.py
from setuptools import setup, find_packages

setup(
    name="sitecheck",
    version="0.1.0",
    description="Проверка доступности сайтов: заголовок главной страницы и первые ссылки",
    packages=find_packages(include=["sitecheck", "sitecheck.*"]),
    package_data={"sitecheck": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "jinja2>=3.1",
        "playwright>=1.40",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitecheck=sitecheck.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
