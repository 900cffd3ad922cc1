# Repositories package.
#
# Repositories are the only code that issues SQL.  Each wraps the
# request-scoped AsyncSession and exposes the store operations the
# service layer needs:
#
#   post_repository: save / find_by_id / find_all (paged) / delete for Post
#
# Repositories flush but never commit; the transaction boundary belongs
# to the service layer (see ``board.database.transaction``).
