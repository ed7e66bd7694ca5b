from setuptools import setup
setup(
    name='cardtrick',
    packages=['cardtrick'],
    version='0.1.0',
    license='MIT',
    description='The Fitch Cheney five-card trick',
    keywords=[
        'card-trick',
        'fitch-cheney',
        'machine-learning',
        'card-game'
    ],
    install_requires=[
        'numpy>=1.17.0',
        'scikit-learn>=0.21.3'
    ],
    extras_require={
        'test': ['pytest>=5.0.1']
    },
    entry_points={
        'console_scripts': [
            'cardtrick=cardtrick.trick:main',
            'cardtrick-train=cardtrick.learning:main'
        ]
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Topic :: Games/Entertainment',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
    ],
)
