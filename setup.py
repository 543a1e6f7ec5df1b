from setuptools import setup, find_packages
import sel


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='sel',
    description="A simple expression language with evaluator, Lisp and C back-ends",
    long_description=long_description,
    version=sel.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    install_requires=['prompt_toolkit'],
    extras_require={
        'test': ['pytest', 'hypothesis', 'lark'],
    },
    entry_points={
        'console_scripts': [
            'sel-check = sel.cli.check:check',
            'sel-run = sel.cli.run:run',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
        'Topic :: Software Development :: Code Generators',
    ]
)
