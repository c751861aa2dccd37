# Services package.
#
# Write paths for the blog.  Reads go straight through the domain wrappers
# and presenters; services exist only where rows are created:
#
#   post_service    : create a Post record
#   comment_service : append a Comment to an existing post
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.
