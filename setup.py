from setuptools import setup

requirements = [
    'numpy',
    'graphviz',
    'IPython',
    'arsenal',
]


setup(
    name='finite-automata',
    version='0.1',
    description='Random finite automata, subset construction, Moore minimization and simulation',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.10',
    readme='',
    scripts=[],
    packages=['finite_automata'],
)
