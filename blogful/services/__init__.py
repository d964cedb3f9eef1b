# Services package.
#
# Each module is the data-access layer for one table:
#
#   article_service: blogful_articles
#   comment_service: blogful_comments
#   user_service: blogful_users
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Every function exposes the same five operations:
# get all, get by id, insert, update, delete.
