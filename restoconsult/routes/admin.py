"""Admin dashboard routes."""

from flask import Blueprint, render_template, redirect, url_for, flash, request
from restoconsult.models import InquiryStatus, PostFilter
from restoconsult.forms.admin import InquiryUpdateForm, BlogPostForm
from restoconsult.services.blog import BlogManager
from restoconsult.services.dashboard import DashboardStats
from restoconsult.services.inquiries import InquiriesManager, mailto_link, ALL
from restoconsult.store import get_client
from restoconsult.utils.decorators import staff_required

admin_bp = Blueprint('admin', __name__)


def _status_arg(enum_cls, default):
    """Status filter from the query string; unknown values fall back to ``default``."""
    value = request.args.get('status', default)
    if value == default:
        return default
    try:
        return enum_cls(value).value
    except ValueError:
        return default


@admin_bp.route('/')
@staff_required
def dashboard(identity):
    """Overview counters and recent inquiries."""
    stats = DashboardStats.collect(get_client())
    if stats.error:
        flash(f'Error loading dashboard: {stats.error.message}', 'danger')

    return render_template('admin/dashboard.html', identity=identity, stats=stats)


# --- Inquiries ---
@admin_bp.route('/inquiries')
@staff_required
def inquiries(identity):
    """Inquiries list with status and search filters."""
    status = _status_arg(InquiryStatus, ALL)
    search = request.args.get('q', '').strip()

    manager = InquiriesManager(get_client())
    result = manager.load()
    if not result.ok:
        flash(f'Error loading inquiries: {result.error.message}', 'danger')

    return render_template('admin/inquiries.html',
                         identity=identity,
                         inquiries=manager.filter(status, search),
                         has_inquiries=bool(manager.inquiries),
                         current_status=status,
                         search=search,
                         statuses=list(InquiryStatus))


@admin_bp.route('/inquiries/<inquiry_id>')
@staff_required
def inquiry_detail(identity, inquiry_id):
    """Inquiry details and the manage form."""
    manager = InquiriesManager(get_client())
    result = manager.get(inquiry_id)
    if not result.ok:
        flash(f'Error loading inquiry: {result.error.message}', 'danger')
        return redirect(url_for('admin.inquiries'))

    inquiry = result.data
    form = InquiryUpdateForm(status=inquiry['status'], admin_notes=inquiry['admin_notes'] or '')

    return render_template('admin/inquiry_detail.html',
                         identity=identity,
                         inquiry=inquiry,
                         status=InquiryStatus(inquiry['status']),
                         form=form,
                         mailto=mailto_link(inquiry))


@admin_bp.route('/inquiries/<inquiry_id>/status', methods=['POST'])
@staff_required
def update_inquiry(identity, inquiry_id):
    """Save status and admin notes."""
    form = InquiryUpdateForm()
    if not form.validate_on_submit():
        flash('Please choose a valid status.', 'danger')
        return redirect(url_for('admin.inquiry_detail', inquiry_id=inquiry_id))

    manager = InquiriesManager(get_client())
    result = manager.update_status(inquiry_id, form.status.data, form.admin_notes.data)
    if not result.ok:
        flash(f'Error updating status: {result.error.message}', 'danger')
        return redirect(url_for('admin.inquiry_detail', inquiry_id=inquiry_id))

    label = InquiryStatus(form.status.data).label.lower()
    flash(f'Status updated. Inquiry marked as {label}.', 'success')
    return redirect(url_for('admin.inquiries'))


# --- Blog ---
@admin_bp.route('/blog')
@staff_required
def blog(identity):
    """Blog posts list with status and search filters."""
    status = _status_arg(PostFilter, PostFilter.ALL.value)
    search = request.args.get('q', '').strip()

    manager = BlogManager(get_client(), identity)
    result = manager.load()
    if not result.ok:
        flash(f'Error loading blog posts: {result.error.message}', 'danger')

    return render_template('admin/blog.html',
                         identity=identity,
                         posts=manager.filter(status, search),
                         has_posts=bool(manager.posts),
                         current_status=status,
                         search=search,
                         filters=list(PostFilter))


@admin_bp.route('/blog/new', methods=['GET', 'POST'])
@staff_required
def new_post(identity):
    """Create a blog post."""
    form = BlogPostForm()

    if form.validate_on_submit():
        manager = BlogManager(get_client(), identity)
        result = manager.save(form.data)
        if result.ok:
            flash('Post created. Blog post has been created successfully.', 'success')
            return redirect(url_for('admin.blog'))
        flash(f'Error saving post: {result.error.message}', 'danger')

    return render_template('admin/blog_form.html', identity=identity, form=form, post=None)


@admin_bp.route('/blog/<post_id>/edit', methods=['GET', 'POST'])
@staff_required
def edit_post(identity, post_id):
    """Edit a blog post."""
    manager = BlogManager(get_client(), identity)
    result = manager.get(post_id)
    if not result.ok:
        flash(f'Error loading post: {result.error.message}', 'danger')
        return redirect(url_for('admin.blog'))

    post = result.data
    form = BlogPostForm()

    if form.validate_on_submit():
        result = manager.save(form.data, post_id=post_id)
        if result.ok:
            flash('Post updated. Blog post has been updated successfully.', 'success')
            return redirect(url_for('admin.blog'))
        flash(f'Error saving post: {result.error.message}', 'danger')
    elif request.method == 'GET':
        form.load_post(post)

    return render_template('admin/blog_form.html', identity=identity, form=form, post=post)


@admin_bp.route('/blog/<post_id>/delete', methods=['POST'])
@staff_required
def delete_post(identity, post_id):
    """Delete a blog post (confirmed in the browser)."""
    manager = BlogManager(get_client(), identity)
    result = manager.delete(post_id)
    if result.ok:
        flash('Post deleted. Blog post has been deleted successfully.', 'success')
    else:
        flash(f'Error deleting post: {result.error.message}', 'danger')
    return redirect(url_for('admin.blog'))


@admin_bp.route('/blog/<post_id>/toggle-published', methods=['POST'])
@staff_required
def toggle_published(identity, post_id):
    """Publish a draft or take a post offline."""
    manager = BlogManager(get_client(), identity)
    result = manager.get(post_id)
    if result.ok:
        post = result.data
        result = manager.toggle_published(post)

    if not result.ok:
        flash(f'Error updating post: {result.error.message}', 'danger')
    elif post['published']:
        flash('Post unpublished. Post is now draft.', 'success')
    else:
        flash('Post published. Post is now live.', 'success')
    return redirect(url_for('admin.blog'))


# --- Settings ---
@admin_bp.route('/settings')
@staff_required
def settings(identity):
    """Account information."""
    return render_template('admin/settings.html', identity=identity)
