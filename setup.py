from pathlib import Path

from setuptools import find_packages, setup


def get_long_description() -> str:
    return Path("README.md").read_text(encoding="utf8")


setup(
    name="bfup",
    author="Łukasz Dragon",
    author_email="lukasz.b.dragon@gmail.com",
    description="Preprocessor for brainfuck-like languages.",
    use_scm_version={"fallback_version": "0.1.1"},
    url="https://github.com/kxlsx/bfup",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="GPL-3.0-only",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["colorama"],
    extras_require={"tests": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["bfup=_bfup.cli:main"]},
    python_requires=">=3.8",
    platforms="any",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Pre-processors",
    ],
    setup_requires=["setuptools_scm"],
    include_package_data=True,
)
