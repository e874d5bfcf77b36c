import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="openapi_to_joi",
    version="1.0.0",
    description="Compile OpenAPI route parameters and request bodies into Joi validation rules",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="openapi joi validation code generation schema",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "jinja2>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    include_package_data=True,
    package_data={
        "openapi_to_joi": ["templates/*.jinja2", "joi_rules.json"],
    },
    zip_safe=False,
)
