from setuptools import setup, find_packages

setup(
   name="collection-driver",
   version="0.1.0",
   description="asyncio facade over a MongoDB database handle",
   package_dir={"": "src"},
   packages=find_packages(where="src"),
   include_package_data=True,
   python_requires=">=3.10",
   install_requires=[
      "motor",
      "pymongo",
   ],
   extras_require={
      "test": [
         "pytest>=7.0",
         "pytest-asyncio",
      ],
   },
)
