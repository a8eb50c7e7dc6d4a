from flask import Flask, request, jsonify, Blueprint, current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError
from flask_migrate import Migrate
from sqlalchemy import update
from flasgger import Swagger
from flask_cors import CORS
from datetime import datetime
from contextlib import contextmanager
import logging
import time
import uuid
import re
import cloudinary
