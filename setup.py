from setuptools import setup

setup(
    name='atmfjstc-rust-codegen',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.rust_codegen', 'atmfjstc.lib.rust_codegen.items'],

    install_requires=[
        'atmfjstc-py-lang-utils>=1.10, <2',
        'atmfjstc-text-utils>=1.3, <2',
        'atmfjstc-ez-repr>=1.1, <2',
    ],

    zip_safe=True,

    description="A builder-style model for generating Rust source code with correct indentation and grouped imports",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Code Generators"
    ],
    python_requires='>=3.7',
)
