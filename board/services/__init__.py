# Services package.
#
#   post_service: create / read / paged read / update / delete for Post
#
# A service is built per request with the request's AsyncSession (see
# ``board.dependencies.get_post_service``).  Mutating operations run
# inside ``board.database.transaction`` and commit before returning;
# lookups of missing ids raise ``PostNotFoundError`` for the HTTP layer
# to translate.
