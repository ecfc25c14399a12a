from .database import db, init_db
from .users import User, bcrypt
from .section import Section
from .photo import Photo
from .vote import Vote
from .comment import Comment
from .photo_tag import PhotoTag
from .admin_log import AdminLog
