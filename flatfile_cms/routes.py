from flatfile_cms import app
from .auth import compute_password_hash, validate_password, login_required, user_signed_in
from .storage import DocumentStore, UserStore
from . import utils

from flask import request, session, flash, redirect, url_for, render_template, g, make_response
from werkzeug.routing import BaseConverter

class DocumentNameConverter(BaseConverter):
    regex=utils.DOCUMENT_NAME_PATTERN

app.url_map.converters["document"]=DocumentNameConverter

@app.before_request
def load_stores():
    g.documents=DocumentStore(app.config["DATA_PATH"])
    g.users=UserStore(app.config["USERS_PATH"])

@app.context_processor
def inject_user():
    return {"username":session.get("username"), "signed_in":user_signed_in()}

def missing_document(name):
    flash("{} does not exist".format(name))
    return redirect(url_for("index"))

@app.route("/")
def index():
    return render_template("index.html", files=g.documents.names())

# Sign in, sign out and sign up

@app.route("/users/signin")
def signin_form():
    return render_template("signin.html")

@app.route("/users/signin", methods=["POST"])
def signin():
    username=request.form.get("username","")
    password=request.form.get("password","")
    if validate_password(g.users.load(), username, password):
        session["username"]=username
        flash("Welcome!")
        return redirect(url_for("index"))
    flash("Invalid credentials")
    return render_template("signin.html", form_username=username), 422

@app.route("/users/signout", methods=["POST"])
def signout():
    session.pop("username", None)
    flash("You have been signed out")
    return redirect(url_for("index"))

@app.route("/users/signup")
def signup_form():
    return render_template("signup.html")

@app.route("/users/signup", methods=["POST"])
def signup():
    username=request.form.get("username","")
    password=request.form.get("password","")
    confirmation=request.form.get("confirmation","")
    try:
        utils.validate_signup(username, password, confirmation, g.users.load())
    except ValueError as e:
        flash(str(e))
        return render_template("signup.html", form_username=username), 422
    g.users.add(username, compute_password_hash(password))
    flash("{} added as user".format(username))
    return redirect(url_for("index"))

# Document CRUD operations

#Creation
@app.route("/new")
@login_required
def new_document():
    return render_template("new.html")

@app.route("/create", methods=["POST"])
@login_required
def create_document():
    file_name=request.form.get("file_name","").strip()
    try:
        utils.validate_document_name(file_name, g.documents.names())
    except ValueError as e:
        flash(str(e))
        return render_template("new.html", file_name=file_name), 422
    g.documents.create(file_name)
    flash("{} has been created.".format(file_name))
    return redirect(url_for("index"))

#Retrieval
@app.route("/<document:file>")
def view_document(file):
    if not g.documents.exists(file):
        return missing_document(file)
    kind, body=g.documents.render(file)
    if kind=="markdown":
        return render_template("document.html", file=file, body=body)
    response=make_response(body)
    response.mimetype="text/plain"
    return response

#Updates
@app.route("/<document:file>/edit")
@login_required
def edit_document(file):
    if not g.documents.exists(file):
        return missing_document(file)
    return render_template("edit.html", file=file, content=g.documents.read(file))

@app.route("/<document:file>", methods=["POST"])
@login_required
def update_document(file):
    if not g.documents.exists(file):
        return missing_document(file)
    g.documents.write(file, request.form.get("content",""))
    flash("{} has been updated.".format(file))
    return redirect(url_for("index"))

#Deletion
@app.route("/<document:file>/delete", methods=["POST"])
@login_required
def delete_document(file):
    if not g.documents.exists(file):
        return missing_document(file)
    g.documents.delete(file)
    flash("{} has been deleted.".format(file))
    return redirect(url_for("index"))

#Copying
@app.route("/<document:file>/copy")
@login_required
def copy_form(file):
    if not g.documents.exists(file):
        return missing_document(file)
    return render_template("copy.html", file=file)

@app.route("/<document:file>/copy", methods=["POST"])
@login_required
def copy_document(file):
    if not g.documents.exists(file):
        return missing_document(file)
    file_name=request.form.get("file_name","").strip()
    try:
        utils.validate_document_name(file_name, g.documents.names())
    except ValueError as e:
        flash(str(e))
        return render_template("copy.html", file=file, file_name=file_name), 422
    g.documents.copy(file, file_name)
    flash("Contents of {} copied to {}.".format(file, file_name))
    return redirect(url_for("index"))
