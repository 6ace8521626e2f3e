from setuptools import setup, find_packages

setup(
    name="bookbot",
    version="1.0.0",
    description="Discord bot for searching and recommending books via Google Books",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "discord.py>=2.3",
        "pydantic>=2.0",
        "requests>=2.28",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'bookbot=bookbot.cli:app',
        ],
    },
)
